"""
Group candidate applications into one entry per person.

A person is identified by their trimmed contact number. Applications without
a contact number are left out of the grouped view.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from recruitops.models.candidate_application import CandidateApplication
from recruitops.schemas.candidate import CandidateRead, GroupedCandidate

PLACEHOLDER = "—"
NO_RESPONSE = "Null"

ScoreIndex = Dict[Tuple[str, str], Optional[str]]


def build_score_index(rows: Iterable[Tuple[Optional[str], Optional[str], Optional[str]]]) -> ScoreIndex:
    """(application_id, role_code) -> score. Later rows win over earlier ones."""
    index: ScoreIndex = {}
    for application_id, role_code, score in rows:
        if application_id and role_code:
            index[(application_id, role_code)] = score
    return index


def _distinct_role_codes(applications: Sequence[CandidateApplication]) -> List[str]:
    seen: List[str] = []
    for application in applications:
        if application.role_code and application.role_code not in seen:
            seen.append(application.role_code)
    return seen


def _history_lines(previous: Sequence[CandidateApplication], scores: ScoreIndex) -> List[str]:
    # previous is newest first, so the first hit per role code is the most recent one
    lines = []
    seen = set()
    for application in previous:
        role_code = application.role_code
        if not role_code or role_code in seen:
            continue
        seen.add(role_code)
        score = scores.get((application.application_id, role_code)) or PLACEHOLDER
        response = application.screening_response or NO_RESPONSE
        lines.append(f"{role_code}: {score}, {response}")
    return lines


def group_candidates_by_contact(
    applications: Iterable[CandidateApplication],
    scores: ScoreIndex,
    count_applications: bool = False,
) -> List[GroupedCandidate]:
    """
    Build one GroupedCandidate per contact number, most recently active first.

    Within a group the newest application supplies name, location and date;
    the older ones feed last_applied and the per-role history lines.
    times_applied is 1 unless count_applications is set.
    """
    partitions: Dict[str, List[CandidateApplication]] = {}
    for application in applications:
        contact = (application.contact_number or "").strip()
        if contact:
            partitions.setdefault(contact, []).append(application)

    grouped = []
    for contact, members in partitions.items():
        ordered = sorted(members, key=lambda a: a.created_at, reverse=True)
        latest, previous = ordered[0], ordered[1:]

        group = GroupedCandidate(
            contact=contact,
            name=latest.candidate_name or PLACEHOLDER,
            location=latest.current_location or PLACEHOLDER,
            applied_on=latest.created_at.date(),
            role_codes=_distinct_role_codes(ordered),
            last_applied=previous[0].created_at.date() if previous else None,
            last_applied_roles=_history_lines(previous, scores),
            times_applied=len(ordered) if count_applications else 1,
            applications=[CandidateRead.model_validate(a) for a in ordered],
        )
        grouped.append((latest.created_at, group))

    grouped.sort(key=lambda item: item[0], reverse=True)
    return [group for _, group in grouped]
