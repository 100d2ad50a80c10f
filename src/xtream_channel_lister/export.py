"""
Report export module.

This module saves the channel report locally and uploads it to
S3-compatible storage.
"""

import os
import logging
import time
import boto3
from typing import Any
from botocore.exceptions import ClientError

from .utils import SanitizedLogger


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = SanitizedLogger(logging.getLogger(__name__))

# Security: refuse to upload anything larger than 100MB
MAX_UPLOAD_SIZE = 100 * 1024 * 1024


def save_report_locally(content: str, filename: str, config: Any) -> str:
    """
    Save the report to a file in the output directory

    Args:
        content (str): Report text
        filename (str): File name inside the output directory
        config: Configuration object with output directory setting

    Returns:
        str: Path of the written file
    """
    output_dir = config.OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    filepath = os.path.join(output_dir, filename)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(content)

    file_size_kb = os.path.getsize(filepath) / 1024
    logger.info(f"Report saved locally as {filepath} (size: {file_size_kb:.2f} KB)")
    return filepath


def create_s3_client(config: Any):
    """
    Create an S3 client for the configured S3-compatible endpoint.

    Credentials come from AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.

    Raises:
        ValueError: The endpoint is not an HTTP/HTTPS URL or credentials are missing
    """
    endpoint_url = config.S3_COMPATIBLE_CONFIG['endpoint_url']
    if not endpoint_url or not isinstance(endpoint_url, str) or not endpoint_url.startswith(('http://', 'https://')):
        raise ValueError(f"Invalid S3 endpoint URL: {endpoint_url}. Must be a valid HTTP/HTTPS URL.")

    aws_access_key_id = os.environ.get('AWS_ACCESS_KEY_ID')
    aws_secret_access_key = os.environ.get('AWS_SECRET_ACCESS_KEY')
    if not aws_access_key_id or not aws_secret_access_key:
        raise ValueError("AWS credentials not found in environment variables. Please set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.")

    return boto3.client(
        's3',
        endpoint_url=endpoint_url,
        aws_access_key_id=aws_access_key_id,
        aws_secret_access_key=aws_secret_access_key,
        region_name=config.S3_COMPATIBLE_CONFIG['region']
    )


def upload_report_to_s3(content: str, config: Any) -> str:
    """
    Upload the channel report to S3_BUCKET_NAME under S3_REPORT_KEY.

    The object is stored as UTF-8 text and served inline under the key's
    base name, with the report's line count in its metadata.

    Args:
        content (str): Report text
        config: Configuration object with S3 settings

    Returns:
        str: s3:// location of the uploaded report
    """
    bucket_name = config.S3_DEFAULT_BUCKET_NAME
    report_key = config.S3_REPORT_KEY
    location = f"s3://{bucket_name}/{report_key}"

    body = content.encode('utf-8')
    if len(body) > MAX_UPLOAD_SIZE:
        raise ValueError(f"Channel report is too large to upload: {len(body)} bytes (>100MB)")

    logger.info(f"Uploading channel report ({len(body) / 1024:.2f} KB) to {location}")
    s3_client = create_s3_client(config)

    try:
        s3_client.put_object(
            Bucket=bucket_name,
            Key=report_key,
            Body=body,
            ContentType='text/plain; charset=utf-8',
            ContentDisposition=f'inline; filename="{os.path.basename(report_key)}"',
            Metadata={
                'uploaded-by': 'xtream-channel-lister',
                'upload-timestamp': str(int(time.time())),
                'report-lines': str(content.count('\n'))
            }
        )
    except ClientError as e:
        logger.error(f"Error uploading channel report to {location}: {e}")
        raise

    logger.info(f"Channel report uploaded to {location}")
    return location
