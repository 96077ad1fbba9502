"""Core constants used across person lookup modules.

This module centralizes file names, JSON field names, and env keys.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path("App_Data")
DEFAULT_CACHE_DIR = Path(".person_lookup") / "cache"
EXISTING_PERSONS_FILE_NAME = "existingPersons.json"
SCRAWL_RESULTS_FILE_NAME = "scrawlResult.json"
DATA_FILE_ENCODING = "utf-8"
JOIN_KEY_SEPARATOR = "|"
S3_URI_SCHEME = "s3://"

USER_DATA_FIELD = "userData"
PERSON_ID_FIELD = "personId"
PERSON_NAME_FIELD = "personName"
EMAIL_ADDRESS_FIELD = "emailAddress"
PHONE_NUMBER_FIELD = "phoneNumber"
MOBILE_NUMBER_FIELD = "mobileNumber"
POSITION_FIELD = "position"
OFFICE_NAME_FIELD = "officeName"
PROFILE_URL_FIELD = "profileUrl"
PHOTO_URL_FIELD = "photoUrl"

ENV_DATA_ROOT = "PERSON_LOOKUP_DATA_ROOT"
ENV_EXISTING_PERSONS_FILE = "PERSON_LOOKUP_EXISTING_PERSONS_FILE"
ENV_SCRAWL_RESULTS_FILE = "PERSON_LOOKUP_SCRAWL_RESULTS_FILE"
ENV_CACHE_DIR = "PERSON_LOOKUP_CACHE_DIR"
ENV_S3_REGION = "PERSON_LOOKUP_S3_REGION"
ENV_S3_PROFILE = "PERSON_LOOKUP_S3_PROFILE"
