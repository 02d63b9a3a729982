"""Driver evaluation score.

Five criteria are rated on a five-level scale; the score is their mean
rounded to one decimal. When an incident happened the evaluator supplies
the score directly and must describe the incident.
"""
from app.utils.exceptions import AppException

RATING_VALUES = {
    "pessimo": 1,
    "ruim": 2,
    "regular": 3,
    "bom": 4,
    "excelente": 5,
}

CRITERIA = (
    "postura_profissional",
    "pontualidade",
    "apresentacao_pessoal",
    "cordialidade",
    "cumpriu_processo",
)

MIN_SCORE = 1.0
MAX_SCORE = 5.0


def compute_score(
    ratings: dict[str, str],
    had_incident: bool = False,
    manual_score: float | None = None,
    incident_description: str | None = None,
) -> float:
    if had_incident:
        if manual_score is None:
            raise AppException("Informe a nota manual quando houver ocorrência")
        if not MIN_SCORE <= manual_score <= MAX_SCORE:
            raise AppException(f"A nota manual deve estar entre {MIN_SCORE} e {MAX_SCORE}")
        if not incident_description or not incident_description.strip():
            raise AppException("Descreva a ocorrência")
        return round(float(manual_score), 1)

    missing = [c for c in CRITERIA if c not in ratings]
    if missing:
        raise AppException(f"Critério sem avaliação: {missing[0]}")
    try:
        values = [RATING_VALUES[ratings[c]] for c in CRITERIA]
    except KeyError as exc:
        raise AppException(f"Nível de avaliação inválido: {exc.args[0]}") from None
    return round(sum(values) / len(values), 1)
