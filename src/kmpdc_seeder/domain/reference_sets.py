"""Accumulation of deduplicated reference values across register rows."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import ReferenceSets


@dataclass(slots=True)
class ReferenceSetCollector:
    """Caller-owned accumulator for one normalization run.

    Every ``observe_*`` method ignores blank values. ``finalize`` materializes the
    sets in ordinal sort order so repeated runs over the same rows compare equal.
    """

    degrees: set[str] = field(default_factory=set[str])
    institutions: set[str] = field(default_factory=set[str])
    specialities: set[str] = field(default_factory=set[str])
    sub_specialities: dict[str, set[str]] = field(default_factory=dict[str, set[str]])
    addresses: set[str] = field(default_factory=set[str])
    statuses: set[str] = field(default_factory=set[str])

    def observe_degree(self, name: str) -> None:
        _add(self.degrees, name)

    def observe_institution(self, name: str) -> None:
        _add(self.institutions, name)

    def observe_speciality(self, name: str) -> None:
        _add(self.specialities, name)

    def observe_sub_speciality(self, parent_speciality: str, name: str) -> None:
        # The parent may be blank; the sub-speciality is still kept under "".
        if not name.strip():
            return
        self.sub_specialities.setdefault(parent_speciality, set()).add(name)

    def observe_address(self, value: str) -> None:
        _add(self.addresses, value)

    def observe_status(self, name: str) -> None:
        _add(self.statuses, name)

    def finalize(self) -> ReferenceSets:
        return ReferenceSets(
            degrees=tuple(sorted(self.degrees)),
            institutions=tuple(sorted(self.institutions)),
            specialities=tuple(sorted(self.specialities)),
            sub_specialities={
                parent: tuple(sorted(names))
                for parent, names in sorted(self.sub_specialities.items())
            },
            addresses=tuple(sorted(self.addresses)),
            statuses=tuple(sorted(self.statuses)),
        )


def _add(bucket: set[str], value: str) -> None:
    if value.strip():
        bucket.add(value)
