"""config_loading.py"""
from pathlib import Path

from clip.config import loader

parser = loader(Path(__file__).parent / "clip.yaml")

if __name__ == "__main__":
    print(parser.parse_env())
