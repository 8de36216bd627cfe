"""Services for dockmatrix CLI."""

from dockmatrix_cli.services.generation_service import (
    GeneratedPipeline,
    PipelineGenerationService,
)

__all__ = [
    "GeneratedPipeline",
    "PipelineGenerationService",
]
