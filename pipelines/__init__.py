from pipelines.eip_unused import EIPUnusedPipeline
from pipelines.nat_unused import NATUnusedPipeline
from pipelines.ebs_unused import EBSUnusedPipeline

__all__ = [
    "EIPUnusedPipeline",
    "NATUnusedPipeline",
    "EBSUnusedPipeline",
]
