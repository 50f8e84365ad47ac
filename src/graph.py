"""Ancestor trees built from flat lists of profiles, and their NetworkX views."""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging

import networkx as nx

from dates import cleanup_date
from models import Gender, PersonProfile


logger = logging.getLogger(__name__)


@dataclass
class Lineage:
    """Resolved biological parents of one person, by person id."""

    father_id: int | None = None
    mother_id: int | None = None


class AncestorTree:
    """
    Acyclic father/mother links between the profiles of someone's ancestors.

    Profiles are shared with whoever built them and are never modified; the
    resolved links live in a separate lineage table keyed by person id.
    """

    def __init__(
        self,
        profiles: dict[int, PersonProfile],
        lineage: dict[int, Lineage],
        root_id: int | None = None,
    ):
        self._profiles = profiles
        self._lineage = lineage
        self.root_id = root_id

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[PersonProfile]:
        return iter(self._profiles.values())

    def __contains__(self, person) -> bool:
        person_id = person.person_id if isinstance(person, PersonProfile) else person
        return person_id in self._profiles

    @property
    def root(self) -> PersonProfile | None:
        return self._profiles.get(self.root_id) if self.root_id is not None else None

    def profile(self, person_id: int) -> PersonProfile:
        return self._profiles[person_id]

    def lineage(self, person) -> Lineage:
        person_id = person.person_id if isinstance(person, PersonProfile) else person
        return self._lineage[person_id]

    def father_of(self, person) -> PersonProfile | None:
        father_id = self.lineage(person).father_id
        return None if father_id is None else self._profiles[father_id]

    def mother_of(self, person) -> PersonProfile | None:
        mother_id = self.lineage(person).mother_id
        return None if mother_id is None else self._profiles[mother_id]

    def ancestors_of(self, person) -> list[PersonProfile]:
        """
        All ancestors reachable through resolved links, breadth first.

        Each ancestor appears once even if reachable along several lines.
        """
        start = person.person_id if isinstance(person, PersonProfile) else person
        seen = {start}
        queue = deque([start])
        result: list[PersonProfile] = []
        while queue:
            current = queue.popleft()
            links = self._lineage[current]
            for parent_id in (links.father_id, links.mother_id):
                if parent_id is not None and parent_id not in seen:
                    seen.add(parent_id)
                    queue.append(parent_id)
                    result.append(self._profiles[parent_id])
        return result

    def to_graph(self) -> nx.DiGraph:
        """
        Build a NetworkX directed graph of the tree.

        Edges go from parent to child and carry a ``relationship_type`` of
        FATHER_OF or MOTHER_OF.
        """
        G = nx.DiGraph()
        for person_id, profile in self._profiles.items():
            G.add_node(
                person_id,
                person_name=profile.short_name,
                sex={Gender.MALE: "M", Gender.FEMALE: "F"}.get(profile.gender),
                birth_date=cleanup_date(profile.birth_date) if profile.has_birth_date() else None,
                death_date=cleanup_date(profile.death_date) if profile.has_death_date() else None,
            )

        for person_id, links in self._lineage.items():
            if links.father_id is not None:
                G.add_edge(links.father_id, person_id, relationship_type="FATHER_OF")
            if links.mother_id is not None:
                G.add_edge(links.mother_id, person_id, relationship_type="MOTHER_OF")

        return G


def _documented_parent_ids(profile: PersonProfile) -> tuple[int | None, int | None]:
    father_id = profile.father_id
    if father_id is None and profile.biological_father is not None:
        father_id = profile.biological_father.person_id
    mother_id = profile.mother_id
    if mother_id is None and profile.biological_mother is not None:
        mother_id = profile.biological_mother.person_id
    return father_id, mother_id


def build_ancestor_tree(
    profiles: Iterable[PersonProfile], root: PersonProfile | int | None = None
) -> AncestorTree:
    """
    Link a flat list of ancestor profiles into an acyclic tree.

    Every profile is indexed by person id before any link is resolved. Each
    documented father/mother reference that names an indexed profile is bound
    unless the candidate parent can already reach the child by walking up the
    links bound so far; such a link would close a loop and is left out.
    The result therefore never contains a cycle, at the price of sometimes
    omitting an ancestor link the raw data claims.

    Args:
        profiles: The flat collection of ancestor profiles
        root: The person whose ancestors these are (profile or person id)

    Returns:
        The resolved AncestorTree
    """
    index: dict[int, PersonProfile] = {}
    for profile in profiles:
        person_id = profile.person_id
        if person_id in index:
            if index[person_id] is not profile:
                logger.warning(
                    "duplicate ancestor %s (person id %d); keeping the first one",
                    profile.name,
                    person_id,
                )
            continue
        index[person_id] = profile

    root_id = root.person_id if isinstance(root, PersonProfile) else root

    # Bound links, child -> parent, so that "walking up" follows edge direction
    upward = nx.DiGraph()
    upward.add_nodes_from(index)
    lineage = {person_id: Lineage() for person_id in index}

    for person_id, profile in index.items():
        father_id, mother_id = _documented_parent_ids(profile)
        for side, parent_id in (("father", father_id), ("mother", mother_id)):
            if parent_id is None or parent_id not in index:
                continue
            if nx.has_path(upward, parent_id, person_id):
                logger.info(
                    "not linking %s to %s %s: the link would create a loop",
                    profile.name,
                    side,
                    index[parent_id].name,
                )
                continue
            upward.add_edge(person_id, parent_id)
            setattr(lineage[person_id], f"{side}_id", parent_id)

    return AncestorTree(index, lineage, root_id)
