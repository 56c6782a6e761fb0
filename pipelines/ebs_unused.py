# ----------------------
# Custom Imports
# ----------------------
from utils import logger
from settings import EBSUnusedConfig
from pipelines.base import BasePipeline


class EBSUnusedPipeline(BasePipeline):
    CONFIG = EBSUnusedConfig

    def fetch_items(self):
        logger.info("Fetching EBS volumes.")
        return self.resources.get_unused_ebs_volumes()
