"""Configuration module for the token top-up report application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Input and output files, resolved against the working directory
USERS_FILE = "users.json"
COMPANIES_FILE = "companies.json"
OUTPUT_FILE = "output.txt"

# Logging
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", "logs")
LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "True").lower() in ["true", "1", "yes"]

# Report settings
# When enabled, a user without "tokens" fails the report instead of rendering blank
STRICT_REPORT_FIELDS = os.environ.get("STRICT_REPORT_FIELDS", "False").lower() in ["true", "1", "yes"]
