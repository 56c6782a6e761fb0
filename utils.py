import csv
import boto3
import gspread
import configparser
import pandas as pd
from pathlib import Path
from google.oauth2.service_account import Credentials

# ----------------------
# Custom Imports
# ----------------------
from settings import CommonConfig

# -------------------------------------------
# Logger
# -------------------------------------------
import logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# -------------------------------------------
# AWS Boto3 Session
# -------------------------------------------
def create_boto3_session(credentials_file: Path | None = None, region_name: str | None = None) -> boto3.Session:
    """
    Create a boto3 session using a local credentials file if it exists,
    otherwise fall back to default AWS credential resolution.
    """
    credentials_file = Path(credentials_file or CommonConfig.CREDENTIALS_FILE)
    session_kwargs = {"region_name": region_name or CommonConfig.AWS_REGION}

    if credentials_file.exists():
        config = configparser.ConfigParser()
        config.read(credentials_file)

        profile_name = config.sections()[0]
        profile_config = config[profile_name]

        logger.info("Credentials file found, using custom credentials.")

        session_kwargs.update(
            {
                "aws_access_key_id": profile_config.get("aws_access_key_id"),
                "aws_secret_access_key": profile_config.get("aws_secret_access_key"),
                "aws_session_token": profile_config.get("aws_session_token"),
            }
        )

    return boto3.Session(**session_kwargs)

# -------------------------------------------
# Formatting
# -------------------------------------------
def format_timestamp(value) -> str:
    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return "" if value is None else str(value)

def get_name_tag(tags: list | None) -> str:
    return next((t["Value"] for t in tags or [] if t["Key"] == "Name"), "")

# -------------------------------------------
# CSV Writer
# -------------------------------------------
def write_to_csv(file: str, row: list[str], mode: str):
    Path(file).parent.mkdir(parents=True, exist_ok=True)
    with open(file, mode, newline="") as f:
        writer = csv.writer(f)
        writer.writerow(row)

# -------------------------------------------
# Google Sheet Functions
# -------------------------------------------
def get_gspread_client():
    creds = Credentials.from_service_account_file(
        CommonConfig.GCC_JSON_PATH,
        scopes=[
            "https://www.googleapis.com/auth/spreadsheets",
            "https://www.googleapis.com/auth/drive",
        ],
    )
    return gspread.authorize(creds)

def get_worksheet(worksheet_name: str):
    gc = get_gspread_client()
    sheet = gc.open(CommonConfig.SPREADSHEET_NAME)
    return sheet.worksheet(worksheet_name)

def col_num_to_letter(n: int) -> str:
    result = ""
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        result = chr(65 + remainder) + result
    return result

def write_df_to_sheet(worksheet_name: str, df: pd.DataFrame):
    if df.empty:
        return

    worksheet = get_worksheet(worksheet_name)
    values = df.fillna("").values.tolist()
    num_columns = len(values[0])
    end_row = 2 + len(values) - 1
    end_col = col_num_to_letter(num_columns)
    clear_range = f"A2:{end_col}"
    cell_range = f"A2:{end_col}{end_row}"

    worksheet.batch_clear([clear_range])
    worksheet.update(cell_range, values, value_input_option="USER_ENTERED")
