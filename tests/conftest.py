import pytest

from helpers import ServerConfig
from main import create_app


@pytest.fixture
def sample_tree(tmp_path):
    """
    root/
      a/
        c.txt
      b.txt
    """
    root = tmp_path / "root"
    (root / "a").mkdir(parents=True)
    (root / "a" / "c.txt").write_text("see")
    (root / "b.txt").write_text("bee")
    return root


@pytest.fixture
def app(sample_tree):
    app = create_app(
        ServerConfig(base_dir=str(sample_tree), workers=1),
        test_config={"TESTING": True, "CHUNK_SIZE": 4},
    )
    yield app
    app.extensions["walk_pool"].shutdown()


@pytest.fixture
def client(app):
    return app.test_client()
