import sys
import argparse

# ----------------------
# Custom Imports
# ----------------------
import utils
from utils import logger
from pipelines import (
    EBSUnusedPipeline,
    EIPUnusedPipeline,
    NATUnusedPipeline,
)

PIPELINES = {
    "eip": EIPUnusedPipeline,
    "nat": NATUnusedPipeline,
    "ebs": EBSUnusedPipeline,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Report unused Elastic IPs, NAT Gateways and EBS volumes.")
    parser.add_argument("--region", help="AWS region to scan (defaults to AWS_REGION or us-east-1).")
    parser.add_argument(
        "--pipeline",
        action="append",
        choices=sorted(PIPELINES),
        help="Pipeline to run, may be repeated. Runs all pipelines when omitted.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    session = utils.create_boto3_session(region_name=args.region)
    selected = args.pipeline or list(PIPELINES)

    failed = []
    for key in selected:
        pipeline_cls = PIPELINES[key]
        pipeline_name = pipeline_cls.__name__
        logger.info(f"Starting pipeline: {pipeline_name}.")

        try:
            pipeline_obj = pipeline_cls(session=session)
            pipeline_obj.run()
            logger.info(f"Finished pipeline: {pipeline_name}.\n")
        except Exception:
            logger.exception(f"ERROR in pipeline: {pipeline_name}")
            failed.append(pipeline_name)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
