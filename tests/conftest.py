"""Pytest fixtures for git-tools tests"""
import tempfile
from dataclasses import dataclass
from pathlib import Path

import git
import pytest

SPECIAL_BRANCH = "with-special-chars-,'\"!@#$_"

# Local file remotes are used for origin, fork and submodule
FILE_PROTOCOL = {"protocol.file.allow": "always"}


@dataclass
class OriginRepo:
    """A bare origin plus the non-bare seed repository that pushes to it."""
    url: str
    seed: git.Repo

    def push_commit(self, filename: str, content: str, branch: str = "master") -> str:
        """Commit a file on ``branch`` in the seed and push it to origin."""
        self.seed.git.checkout(branch)
        (Path(self.seed.working_dir) / filename).write_text(content)
        self.seed.index.add([filename])
        commit = self.seed.index.commit(f"Add {filename}")
        self.seed.git.push("origin", branch)
        return commit.hexsha


def configure_identity(repo: git.Repo):
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


def make_bare(path: Path) -> git.Repo:
    bare = git.Repo.init(path, bare=True)
    bare.git.symbolic_ref("HEAD", "refs/heads/master")
    return bare


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def origin(temp_dir):
    """Bare origin with master (two commits), develop and a branch with special characters."""
    bare_path = temp_dir / "project.git"
    make_bare(bare_path).close()

    seed_path = temp_dir / "seed"
    seed = git.Repo.init(seed_path)
    configure_identity(seed)

    (seed_path / "test.txt").write_text("one\n")
    seed.index.add(["test.txt"])
    seed.index.commit("Initial commit")
    seed.git.branch("-M", "master")

    (seed_path / "README.md").write_text("# Project\n")
    seed.index.add(["README.md"])
    seed.index.commit("Add readme")

    seed.git.branch("develop")
    seed.git.branch(SPECIAL_BRANCH)
    seed.create_remote("origin", str(bare_path))
    seed.git.push("origin", "master", "develop", SPECIAL_BRANCH)

    yield OriginRepo(url=str(bare_path), seed=seed)

    seed.close()


@pytest.fixture
def fork(temp_dir, origin):
    """Bare copy of origin standing in for a contributor's fork."""
    fork_path = temp_dir / "fork.git"
    git.Repo.clone_from(origin.url, fork_path, bare=True).close()
    return str(fork_path)


@pytest.fixture
def checkout_path(temp_dir):
    return str(temp_dir / "checkout")


@pytest.fixture
def working_copy(origin, checkout_path):
    """A plain clone of origin on master, with a committer identity."""
    repo = git.Repo.clone_from(origin.url, checkout_path)
    configure_identity(repo)
    yield repo
    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a standalone Git repository with one commit and no upstream."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    configure_identity(repo)

    (repo_path / "README.md").write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch("-M", "master")

    yield repo

    repo.close()


@pytest.fixture
def origin_with_submodule(temp_dir):
    """Bare origin whose master and develop both include the submodule ``lib``."""
    lib_bare = temp_dir / "lib.git"
    make_bare(lib_bare).close()

    lib_seed_path = temp_dir / "lib-seed"
    lib_seed = git.Repo.init(lib_seed_path)
    configure_identity(lib_seed)
    (lib_seed_path / "lib.txt").write_text("lib\n")
    lib_seed.index.add(["lib.txt"])
    lib_seed.index.commit("Initial lib commit")
    lib_seed.git.branch("-M", "master")
    lib_seed.create_remote("origin", str(lib_bare))
    lib_seed.git.push("origin", "master")
    lib_seed.close()

    bare_path = temp_dir / "parent.git"
    make_bare(bare_path).close()

    seed_path = temp_dir / "parent-seed"
    seed = git.Repo.init(seed_path)
    configure_identity(seed)
    (seed_path / "test.txt").write_text("one\n")
    seed.index.add(["test.txt"])
    seed.index.commit("Initial commit")
    seed.git.branch("-M", "master")
    seed.git(c="protocol.file.allow=always").submodule("add", str(lib_bare), "lib")
    seed.git.commit("-m", "Add lib submodule")
    seed.git.branch("develop")
    seed.create_remote("origin", str(bare_path))
    seed.git.push("origin", "master", "develop")

    yield OriginRepo(url=str(bare_path), seed=seed)

    seed.close()
