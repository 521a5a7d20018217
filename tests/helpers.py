from pathlib import Path


def get_sample_data_dir() -> Path:
    return Path(__file__).parent.absolute() / "sample_data"


def get_sample_data_path(filename: str) -> Path:
    return get_sample_data_dir() / filename
