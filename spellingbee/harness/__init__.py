from .core import run_plays, survey_puzzle, run_survey, parse_puzzle
from .io import write_csv, write_survey_csv, write_manifest

__all__ = [
    "run_plays",
    "survey_puzzle",
    "run_survey",
    "parse_puzzle",
    "write_csv",
    "write_survey_csv",
    "write_manifest",
]
