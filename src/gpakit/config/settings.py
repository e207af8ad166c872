from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    return float(value) if value else default


@dataclass(frozen=True)
class Settings:
    gpa_precision: int = _int_env("GPAKIT_GPA_PRECISION", 3)
    percentage_precision: int = _int_env("GPAKIT_PERCENTAGE_PRECISION", 2)
    sgpa_precision: int = _int_env("GPAKIT_SGPA_PRECISION", 2)

    entries_per_group: int = _int_env("GPAKIT_ENTRIES_PER_GROUP", 4)

    default_target_gpa: float = _float_env("GPAKIT_DEFAULT_TARGET_GPA", 3.5)
    default_target_grade: float = _float_env("GPAKIT_DEFAULT_TARGET_GRADE", 90)
    default_final_weight: float = _float_env("GPAKIT_DEFAULT_FINAL_WEIGHT", 25)
    next_term_credits: float = _float_env("GPAKIT_NEXT_TERM_CREDITS", 15)

    celebrate_gpa: float = _float_env("GPAKIT_CELEBRATE_GPA", 3.8)
    celebrate_percentage: float = _float_env("GPAKIT_CELEBRATE_PERCENTAGE", 90)
    celebrate_cgpa: float = _float_env("GPAKIT_CELEBRATE_CGPA", 9.5)
    celebrate_final_required: float = _float_env("GPAKIT_CELEBRATE_FINAL_REQUIRED", 70)


settings = Settings()
