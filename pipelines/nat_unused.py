# ----------------------
# Custom Imports
# ----------------------
from utils import logger
from settings import NATUnusedConfig
from pipelines.base import BasePipeline


class NATUnusedPipeline(BasePipeline):
    CONFIG = NATUnusedConfig

    def fetch_items(self):
        logger.info("Fetching NAT Gateways and their route tables.")
        return self.resources.get_unused_nat_gateways()
