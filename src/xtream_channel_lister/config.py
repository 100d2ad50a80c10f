"""
Configuration module for the Xtream channel lister.

Settings are read from environment variables. Values passed to the
constructor (the command-line options) take precedence over the environment.
"""

import os
import re
from typing import List, Optional


class Config:
    """
    Configuration class for the Xtream channel lister
    """

    # Path of the player API relative to the panel URL
    API_PATH: str = '/player_api.php'

    DEFAULT_TIMEOUT: int = 10

    # Security: Maximum allowed size of a single API response (50MB)
    MAX_RESPONSE_SIZE: int = 50 * 1024 * 1024

    # Bucket name used when S3_BUCKET_NAME is not set
    PLACEHOLDER_BUCKET_NAME: str = 'your-bucket-name'

    def __init__(self, host: Optional[str] = None, username: Optional[str] = None,
                 password: Optional[str] = None, timeout: Optional[str] = None,
                 report_filename: Optional[str] = None, s3_report_key: Optional[str] = None):
        """Initialize configuration from arguments, falling back to environment variables"""
        self._host = self._pick(host, 'XTREAM_HOST', '')
        self._username = self._pick(username, 'XTREAM_USERNAME', '')
        self._password = self._pick(password, 'XTREAM_PASSWORD', '')
        # Kept as text until validated
        self._timeout_raw = str(self._pick(timeout, 'XTREAM_TIMEOUT', str(self.DEFAULT_TIMEOUT))).strip()

        self._output_dir = os.getenv('OUTPUT_DIR', 'output')
        self._report_filename = self._pick(report_filename, 'REPORT_FILENAME', '')

        self._s3_default_bucket_name = os.getenv('S3_BUCKET_NAME', self.PLACEHOLDER_BUCKET_NAME)
        self._s3_report_key = self._pick(s3_report_key, 'S3_REPORT_KEY', '')
        self._s3_endpoint_url = os.getenv('S3_ENDPOINT_URL', 'https://s3.amazonaws.com')
        self._s3_region = os.getenv('S3_REGION', 'us-east-1')

    @staticmethod
    def _pick(value, env_var: str, default: str):
        if value is not None:
            return value
        return os.getenv(env_var, default)

    @property
    def HOST(self) -> str:
        """Xtream Codes panel URL, e.g. http://domain.com:8080"""
        return self._host

    @property
    def USERNAME(self) -> str:
        """Account username"""
        return self._username

    @property
    def PASSWORD(self) -> str:
        """Account password"""
        return self._password

    @property
    def TIMEOUT(self) -> int:
        """Connection timeout in seconds (call validate_config first)"""
        return int(self._timeout_raw)

    @property
    def API_ENDPOINT(self) -> str:
        """Full player API endpoint"""
        return f"{self._host.rstrip('/')}{self.API_PATH}"

    @property
    def OUTPUT_DIR(self) -> str:
        """Output directory for saved reports"""
        return self._output_dir

    @property
    def REPORT_FILENAME(self) -> str:
        """File name of the local report, empty to skip saving"""
        return self._report_filename

    @property
    def S3_DEFAULT_BUCKET_NAME(self) -> str:
        """S3 default bucket name from environment variable or default"""
        return self._s3_default_bucket_name

    @property
    def S3_REPORT_KEY(self) -> str:
        """S3 object key for the report, empty to skip the upload"""
        return self._s3_report_key

    @property
    def S3_ENDPOINT_URL(self) -> str:
        """S3 endpoint URL from environment variable or default"""
        return self._s3_endpoint_url

    @property
    def S3_REGION(self) -> str:
        """S3 region from environment variable or default"""
        return self._s3_region

    @property
    def S3_COMPATIBLE_CONFIG(self) -> dict:
        """S3-compatible storage configuration from properties"""
        return {
            "endpoint_url": self.S3_ENDPOINT_URL,
            "region": self.S3_REGION
        }

    def set_password(self, password: str) -> None:
        """Set the password once, used when it was prompted for"""
        if self._password:
            raise ValueError("Password is already set")
        self._password = password

    def validate_config(self) -> List[str]:
        """
        Validate configuration settings and return list of validation errors.

        Returns:
            List[str]: List of validation errors, empty if all validations pass
        """
        errors = []

        if not self.HOST:
            errors.append("Host (-H or --host) is required")
        elif not self.HOST.startswith(('http://', 'https://')):
            errors.append("Host must be a valid HTTP/HTTPS URL")

        if not self.USERNAME:
            errors.append("Username (-u or --username) is required")

        if not self.PASSWORD:
            errors.append("Password is required")

        if not re.fullmatch(r'[0-9]+', self._timeout_raw) or int(self._timeout_raw) <= 0:
            errors.append("Timeout must be a positive integer")

        # S3 settings only matter when the report is uploaded
        if self.S3_REPORT_KEY:
            bucket = self.S3_DEFAULT_BUCKET_NAME
            if bucket == self.PLACEHOLDER_BUCKET_NAME:
                errors.append("S3_BUCKET_NAME environment variable not set")
            elif not bucket or len(bucket) < 3 or len(bucket) > 63:
                errors.append("S3_BUCKET_NAME must be between 3 and 63 characters")

            if '..' in self.S3_REPORT_KEY or self.S3_REPORT_KEY.startswith('/'):
                errors.append("S3_REPORT_KEY must not contain '..' or start with '/'")

            endpoint_url = self.S3_ENDPOINT_URL
            if not endpoint_url or not endpoint_url.startswith(('http://', 'https://')):
                errors.append("S3_ENDPOINT_URL must be a valid HTTP/HTTPS URL")
            elif '@' in endpoint_url.split('/')[2]:
                errors.append("S3_ENDPOINT_URL should not contain credentials in the URL")

            if not self.S3_REGION:
                errors.append("S3_REGION must be specified")

        return errors
