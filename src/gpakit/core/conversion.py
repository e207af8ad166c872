from gpakit.core.scales import MAX_GPA


def convert_scale_to_four_point(cgpa10: float) -> float:
    """
    Approximate a 10-point CGPA on the US 4.0 scale.
    us_gpa = clamp((cgpa10 - 0.75) / 2.25, 0, 4.0)

    This is a common rule of thumb, not an official equivalence; treat the
    result as an estimate.
    """
    return max(0.0, min(MAX_GPA, (cgpa10 - 0.75) / 2.25))
