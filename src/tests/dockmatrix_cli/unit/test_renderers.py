"""Unit tests for the CircleCI and GitHub Actions renderers."""

import pytest

from dockmatrix import generate_matrix
from dockmatrix_cli.config import parse_project_config
from dockmatrix_cli.core.constants import Provider
from dockmatrix_cli.renderers import (
    CircleCIRenderer,
    GitHubActionsRenderer,
    get_renderer,
)


@pytest.fixture
def config(sample_versions):
    """Parsed sample configuration."""
    return parse_project_config(sample_versions)


@pytest.fixture
def cells(config):
    """Matrix cells for the sample configuration."""
    return generate_matrix(
        config.primary.versions,
        config.secondary.versions,
        config.prefixes,
    )


@pytest.mark.unit
class TestGetRenderer:
    """Tests for get_renderer."""

    @pytest.mark.parametrize(
        ("provider", "expected"),
        [
            (Provider.CIRCLECI, CircleCIRenderer),
            (Provider.GITHUB, GitHubActionsRenderer),
            ("github", GitHubActionsRenderer),
        ],
    )
    def test_known_providers(self, provider, expected):
        """Verify providers map to their renderer."""
        assert isinstance(get_renderer(provider), expected)

    def test_unknown_provider(self):
        """Verify an unknown provider is rejected."""
        with pytest.raises(ValueError):
            get_renderer("travis")


@pytest.mark.unit
class TestDockerfileCommand:
    """Tests for the shared Dockerfile generation command."""

    def test_circleci_uses_circleci_base_image(self, config, cells):
        """Verify slashes in the base image are escaped for sed."""
        command = CircleCIRenderer().dockerfile_command(cells[0], config)

        assert command == (
            'sed "s/REPLACE_ME_WITH_RIGHT_CIRCLE_IMAGE/circleci\\/ruby:3.0.0/" '
            "Dockerfile.template > Dockerfile"
        )

    def test_github_uses_cimg_base_image(self, config, cells):
        """Verify the GitHub renderer uses its own base image."""
        command = GitHubActionsRenderer().dockerfile_command(cells[1], config)

        assert "cimg\\/ruby:2.7.1" in command

    def test_quotes_are_not_escaped(self, config, cells):
        """Verify shell quotes survive template rendering."""
        command = CircleCIRenderer().build_command(cells[0], config)

        assert '--build-arg rust_version="1.50.0"' in command
        assert "&#34;" not in command


@pytest.mark.unit
class TestCircleCIRenderer:
    """Tests for CircleCIRenderer."""

    def test_document_layout(self, config, cells):
        """Verify top-level keys and workflow name."""
        document = CircleCIRenderer().render(cells, config)

        assert list(document) == ["version", "jobs", "workflows"]
        assert document["version"] == 2
        assert list(document["workflows"]) == ["version", "build-master"]

    def test_jobs_follow_matrix_order(self, config, cells):
        """Verify job keys are the qualified names in matrix order."""
        document = CircleCIRenderer().render(cells, config)

        expected = ["rb3.0.0-rs1.50.0", "rb2.7.1-rs1.50.0", "rb2.7.0-rs1.50.0"]
        assert list(document["jobs"]) == expected
        workflow_jobs = document["workflows"]["build-master"]["jobs"]
        assert [next(iter(job)) for job in workflow_jobs] == expected

    def test_workflow_jobs_filter_on_branch(self, config, cells):
        """Verify every workflow job only runs on the configured branch."""
        document = CircleCIRenderer().render(cells, config)

        for job in document["workflows"]["build-master"]["jobs"]:
            (settings,) = job.values()
            assert settings == {"filters": {"branches": {"only": "master"}}}

    def test_build_command_tags_every_image(self, config, cells):
        """Verify docker build receives one -t per tag, in tag order."""
        command = CircleCIRenderer().build_command(cells[0], config)
        build_line = command.splitlines()[-1]

        assert build_line == (
            "docker build"
            " -t anirbanmu/circleci-ruby-rust:rb3.0.0-rs1.50.0"
            " -t anirbanmu/circleci-ruby-rust:rb3.0-rs1.50.0"
            " -t anirbanmu/circleci-ruby-rust:rb3.0.0-rs1.50"
            " -t anirbanmu/circleci-ruby-rust:rb3.0-rs1.50"
            " -t anirbanmu/circleci-ruby-rust:latest"
            ' --build-arg rust_version="1.50.0" .'
        )

    def test_publish_command_pushes_every_tag(self, config, cells):
        """Verify a push line follows the login for each tag."""
        command = CircleCIRenderer().publish_command(cells[2], config)
        lines = command.splitlines()

        assert lines[0].startswith('echo "$DOCKERHUB_ACCESS_TOKEN" | docker login')
        assert lines[1:] == [
            "docker push anirbanmu/circleci-ruby-rust:rb2.7.0-rs1.50.0",
            "docker push anirbanmu/circleci-ruby-rust:rb2.7.0-rs1.50",
        ]

    def test_job_steps(self, config, cells):
        """Verify checkout and remote docker precede build and publish."""
        job = CircleCIRenderer().render_job(cells[0], config)

        assert job["steps"][:2] == ["checkout", "setup_remote_docker"]
        names = [step["run"]["name"] for step in job["steps"][2:]]
        assert names == ["Build Docker image", "Publish Docker image to Docker Hub"]


@pytest.mark.unit
class TestGitHubActionsRenderer:
    """Tests for GitHubActionsRenderer."""

    def test_document_layout(self, config, cells):
        """Verify workflow name and push trigger."""
        document = GitHubActionsRenderer().render(cells, config)

        assert document["name"] == "build"
        assert document["on"] == {"push": {"branches": ["master"]}}

    def test_job_keys_have_no_dots(self, config, cells):
        """Verify dots in qualified names become underscores."""
        document = GitHubActionsRenderer().render(cells, config)

        assert list(document["jobs"]) == [
            "rb3_0_0-rs1_50_0",
            "rb2_7_1-rs1_50_0",
            "rb2_7_0-rs1_50_0",
        ]

    def test_build_push_step(self, config, cells):
        """Verify tags are comma-joined and the build arg is passed."""
        job = GitHubActionsRenderer().render_job(cells[1], config)
        step = job["steps"][-1]

        assert step["uses"] == "docker/build-push-action@v3"
        assert step["with"]["push"] is True
        assert step["with"]["tags"] == (
            "anirbanmu/circleci-ruby-rust:rb2.7.1-rs1.50.0,"
            "anirbanmu/circleci-ruby-rust:rb2.7-rs1.50.0,"
            "anirbanmu/circleci-ruby-rust:rb2.7.1-rs1.50,"
            "anirbanmu/circleci-ruby-rust:rb2.7-rs1.50"
        )
        assert step["with"]["build-args"] == "rust_version=1.50.0"

    def test_concurrency_group_per_primary_version(self, config, cells):
        """Verify jobs sharing a primary version share a concurrency group."""
        job = GitHubActionsRenderer().render_job(cells[0], config)

        assert job["concurrency"] == "ruby-3.0.0-concurrency-group"
        assert job["runs-on"] == "ubuntu-latest"

    def test_login_uses_secrets(self, config, cells):
        """Verify Docker Hub credentials come from repository secrets."""
        job = GitHubActionsRenderer().render_job(cells[0], config)
        login = next(s for s in job["steps"] if s.get("uses") == "docker/login-action@v2")

        assert login["with"]["username"] == "${{ secrets.DOCKERHUB_USERNAME }}"
        assert login["with"]["password"] == "${{ secrets.DOCKERHUB_TOKEN }}"
