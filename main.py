# main.py
"""Main entry point for the token top-up report application."""
import sys
import traceback

# Application modules
import config
from logger import setup_logging
from handlers.file_handler import load_json_records
from handlers.top_up_processor import create_companies_by_id, apply_user_top_ups
from handlers.report_formatter import format_companies
from handlers.report_writer import create_output_file
from utils.exceptions import TopUpError


def build_report(users_file, companies_file, output_file, strict=False):
    """Run the pipeline from the two input files to the written report.

    Args:
        users_file: Path to the users JSON file
        companies_file: Path to the companies JSON file
        output_file: Path of the report to write
        strict: Require tokens on every reported user

    Returns:
        int: Number of company blocks written

    Raises:
        TopUpError: On the first invalid input, before the report is written
    """
    users = load_json_records(users_file)
    companies = load_json_records(companies_file)

    companies_by_id = create_companies_by_id(companies)
    companies_by_id = apply_user_top_ups(users, companies_by_id)
    formatted_companies = format_companies(companies_by_id)

    return create_output_file(formatted_companies, output_file, strict)


def run_top_up_report():
    """Main function to run the report with logging and error handling.

    Returns:
        int: Process exit code, 0 on success and 1 on any failure
    """
    loggers = setup_logging()
    app_logger = loggers['app']
    error_logger = loggers['error']
    debug_logger = loggers['debug']

    app_logger.info("Starting token top-up report")
    debug_logger.debug(f"Inputs: {config.USERS_FILE}, {config.COMPANIES_FILE}; output: {config.OUTPUT_FILE}")

    try:
        build_report(
            config.USERS_FILE,
            config.COMPANIES_FILE,
            config.OUTPUT_FILE,
            strict=config.STRICT_REPORT_FIELDS,
        )
    except TopUpError as e:
        print(f"Error: {e}")
        error_logger.error(f"{type(e).__name__}: {e}")
        return 1
    except Exception as e:
        stack_trace = traceback.format_exc()
        print(f"Error: {e}")
        error_logger.critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1

    app_logger.info("Token top-up report complete")
    return 0


def main():
    sys.exit(run_top_up_report())


if __name__ == "__main__":
    main()
