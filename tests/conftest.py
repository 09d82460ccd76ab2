import os

import pytest


def write(root, rel_path, content="export {}"):
    """Creates `rel_path` under `root` (parents included) and returns its absolute path."""
    full_path = os.path.join(str(root), *rel_path.split("/"))
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    mode = "wb" if isinstance(content, bytes) else "w"
    with open(full_path, mode) as fh:
        fh.write(content)
    return full_path


@pytest.fixture
def sample_tree(tmp_path):
    """
    A small JavaScript-style project:
    root manifests, sources two levels deep, build output,
    dependencies and dot files.
    """
    write(tmp_path, "package.json", "{}")
    write(tmp_path, "package-lock.json", "{}")
    write(tmp_path, "README.md", "# Test")
    write(tmp_path, "tsconfig.json", "{}")
    write(tmp_path, "src/index.ts")
    write(tmp_path, "src/app.ts")
    write(tmp_path, "src/utils/helper.ts")
    write(tmp_path, "src/utils/format.js")
    write(tmp_path, "dist/index.js")
    write(tmp_path, "node_modules/lib.js")
    write(tmp_path, ".gitignore", "node_modules")
    write(tmp_path, ".config/settings.yml", "{}")
    return tmp_path


@pytest.fixture
def write_file():
    """Exposes `write` to tests: write_file(root, rel_path, content)."""
    return write
