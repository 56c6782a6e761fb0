import utils
import pandas as pd
from typing import Type
from utils import logger
from settings import CommonConfig
from ec2_resources import EC2UnusedResources


class BasePipeline:
    """
    Base class for all pipelines.

    Subclasses MUST define:
      - CONFIG
      - fetch_items()

    process_item(item) writes item.to_row() by default.
    """

    CONFIG: Type[CommonConfig]

    def __init__(self, session=None):
        self.pipeline_name = self.__class__.__name__
        self.session = session or utils.create_boto3_session()
        self.resources = EC2UnusedResources(boto3_session=self.session)
        utils.write_to_csv(self.CONFIG.OUTPUT_CSV, self.CONFIG.CSV_HEADERS, mode="w")

    def fetch_items(self):
        raise NotImplementedError

    def process_item(self, item) -> bool:
        utils.write_to_csv(self.CONFIG.OUTPUT_CSV, item.to_row(), mode="a")
        return True

    def post_process(self):

        # Sorting and saving the CSV.
        df = pd.read_csv(self.CONFIG.OUTPUT_CSV, encoding = "utf-8")
        df = df.sort_values(self.CONFIG.SORT_BY_COLUMN, ascending = self.CONFIG.SORT_ASCENDING)
        df.to_csv(self.CONFIG.OUTPUT_CSV, index = False)

        # Writing the DataFrame to the GSheet.
        if CommonConfig.WRITE_TO_GOOGLE_SHEET and not df.empty:
            utils.write_df_to_sheet(self.CONFIG.WORKSHEET_NAME, df)
            logger.info(f"[{self.pipeline_name}] Updated the {self.CONFIG.WORKSHEET_NAME} sheet successfully.")

    def run(self) -> int:
        items = self.fetch_items()
        logger.info(f"[{self.pipeline_name}] Processing {len(items)} items.")

        processed_count = 0
        for item in items:
            if self.process_item(item):
                processed_count += 1

        self.post_process()
        logger.info(f"[{self.pipeline_name}] Found {processed_count} relevant items.")
        logger.info(f"[{self.pipeline_name}] Report written to {self.CONFIG.OUTPUT_CSV}.")
        return processed_count
