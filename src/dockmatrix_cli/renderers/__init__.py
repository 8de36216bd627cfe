"""CI pipeline renderers, keyed by provider."""

from dockmatrix_cli.core.constants import Provider
from dockmatrix_cli.renderers.base import PipelineRenderer, create_template_environment
from dockmatrix_cli.renderers.circleci import CircleCIRenderer
from dockmatrix_cli.renderers.github import GitHubActionsRenderer

RENDERERS: dict[Provider, type[PipelineRenderer]] = {
    Provider.CIRCLECI: CircleCIRenderer,
    Provider.GITHUB: GitHubActionsRenderer,
}


def get_renderer(provider: Provider | str) -> PipelineRenderer:
    """Create the renderer for a provider.

    Parameters
    ----------
    provider : Provider | str
        Provider enum member or its value

    Returns
    -------
    PipelineRenderer
        New renderer instance

    Raises
    ------
    ValueError
        If the provider is unknown
    """
    return RENDERERS[Provider(provider)]()


__all__ = [
    "RENDERERS",
    "CircleCIRenderer",
    "GitHubActionsRenderer",
    "PipelineRenderer",
    "create_template_environment",
    "get_renderer",
]
