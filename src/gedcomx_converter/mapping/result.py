from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gedcomx_converter.core.context import Diagnostic
from gedcomx_converter.model.conclusion import Agent, Person, SourceDescription


@dataclass
class ConversionResult:
    """
    Everything one conversion run produced, in input order.
    """

    persons: List[Person] = field(default_factory=list)
    source_descriptions: Dict[str, SourceDescription] = field(default_factory=dict)
    dataset_contributor: Optional[Agent] = None
    contributor_modified: Optional[str] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_person(self, person: Person) -> None:
        self.persons.append(person)

    def add_source_description(self, description: SourceDescription) -> None:
        self.source_descriptions[description.id] = description

    def set_dataset_contributor(self, agent: Agent, modified: Optional[str] = None) -> None:
        self.dataset_contributor = agent
        self.contributor_modified = modified

    def get_person(self, person_id: str) -> Optional[Person]:
        for person in self.persons:
            if person.id == person_id:
                return person
        return None

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "persons": [p.to_dict() for p in self.persons],
            "sourceDescriptions": [s.to_dict() for s in self.source_descriptions.values()],
        }
        if self.dataset_contributor is not None:
            data["agents"] = [self.dataset_contributor.to_dict()]
        return data
