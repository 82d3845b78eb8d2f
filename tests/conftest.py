"""Pytest fixtures for git-stack tests"""
import tempfile
from pathlib import Path

import git
import pytest

from git_stack.config import Config
from fakes import InMemoryGit, InMemoryReviews


def _configure_user(repo: git.Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'branch_prefix': 'alice/',
        'max_branch_length': 50,
        'remote_name': 'origin',
        'github_token': 'test_token_for_testing',
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def stack_config(mock_config):
    return Config.from_dict(mock_config)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a single commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def origin_repo(git_repo, temp_dir):
    """Create a bare repository holding main, with HEAD pointing at it."""
    bare_path = temp_dir / "origin.git"
    bare = git.Repo.init(bare_path, bare=True)

    git_repo.create_remote('origin', str(bare_path))
    git_repo.git.push('origin', 'main')
    bare.git.symbolic_ref('HEAD', 'refs/heads/main')

    yield bare

    bare.close()


@pytest.fixture
def cloned_repo(origin_repo, temp_dir):
    """Clone of origin_repo, so refs/remotes/origin/HEAD is set."""
    clone = git.Repo.clone_from(origin_repo.git_dir, temp_dir / "clone")
    _configure_user(clone)

    yield clone

    clone.close()


@pytest.fixture
def fake_git():
    """In-memory repository with trunk main and three topic branches."""
    return InMemoryGit(branches=['main', 'a', 'b', 'c'], current='main', default_branch='main')


@pytest.fixture
def fake_reviews():
    return InMemoryReviews()
