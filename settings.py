import os
from pathlib import Path

# -------------------------------------------
# Common Config
# -------------------------------------------
class CommonConfig:
    AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")
    CREDENTIALS_FILE = Path("./credentials")
    OUTPUT_CSV_DIR = Path (__file__).parent / "output_files"

    # Google Sheet export
    WRITE_TO_GOOGLE_SHEET = False
    GCC_JSON_PATH = Path(__file__).parent / "gcc.json"
    SPREADSHEET_NAME = "AWS Unused Resources"

# -------------------------------------------
# EIP Unused
# -------------------------------------------
class EIPUnusedConfig:
    SORT_BY_COLUMN = "Public IP"
    SORT_ASCENDING = True
    WORKSHEET_NAME = "EIP Unused"
    OUTPUT_CSV = CommonConfig.OUTPUT_CSV_DIR / "eip_unused.csv"
    CSV_HEADERS = ["Public IP", "Allocation ID", "Name", "Domain"]

# -------------------------------------------
# NAT Unused
# -------------------------------------------
class NATUnusedConfig:
    SORT_BY_COLUMN = "Created Time"
    SORT_ASCENDING = True
    WORKSHEET_NAME = "NAT Unused"
    OUTPUT_CSV = CommonConfig.OUTPUT_CSV_DIR / "nat_unused.csv"
    CSV_HEADERS = ["NAT Gateway ID", "VPC ID", "State", "Subnet ID", "Created Time"]

# -------------------------------------------
# EBS Unused
# -------------------------------------------
class EBSUnusedConfig:
    SORT_BY_COLUMN = "Size (GB)"
    SORT_ASCENDING = False
    WORKSHEET_NAME = "EBS Unused"
    OUTPUT_CSV = CommonConfig.OUTPUT_CSV_DIR / "ebs_unused.csv"
    CSV_HEADERS = ["Volume ID", "Name", "Size (GB)", "Volume Type", "State", "Created Time"]
