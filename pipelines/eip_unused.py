# ----------------------
# Custom Imports
# ----------------------
from utils import logger
from settings import EIPUnusedConfig
from pipelines.base import BasePipeline


class EIPUnusedPipeline(BasePipeline):
    CONFIG = EIPUnusedConfig

    def fetch_items(self):
        logger.info("Fetching Elastic IPs.")
        return self.resources.get_unused_elastic_ip_addresses()
