AA_COMPLIANT = "AA Compliant"
AA_PARTIAL = "AA Partial"
A_PARTIAL = "A Partial"


def wcag_level_for_score(score: int) -> str:
    if score >= 90:
        return AA_COMPLIANT
    if score >= 70:
        return AA_PARTIAL
    return A_PARTIAL
