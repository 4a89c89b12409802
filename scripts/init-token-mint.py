import sys
from pathlib import Path

REPO_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_DIR))

from movie_token_client.main import run


if __name__ == "__main__":
    sys.exit(run())
