"""Sanity checks for ancestor trees."""

import networkx as nx

from graph import AncestorTree


def _year(date: str | None) -> int | None:
    """Year of a cleaned-up date ("1957", "1957-10", "1957-10-04"); None if unknown."""
    if not date:
        return None
    try:
        year = int(date[:4])
    except ValueError:
        return None
    return year or None


def validate_ancestor_tree(tree: AncestorTree) -> list[str]:
    """
    Validate an ancestor tree for:
    - Cycles in parent-child links
    - Impossible ages (child born before parent)
    - Death before birth

    Dates are compared by year only since most of them are partial.

    Returns a list of warning messages.
    """
    warnings: list[str] = []
    G = tree.to_graph()

    # Check for cycles; build_ancestor_tree() is supposed to rule these out
    try:
        cycle = nx.find_cycle(G, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child links: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent, child, data in G.edges(data=True):
        parent_data = G.nodes[parent]
        child_data = G.nodes[child]

        parent_year = _year(parent_data.get("birth_date"))
        child_year = _year(child_data.get("birth_date"))
        if parent_year is None or child_year is None:
            continue

        if child_year < parent_year:
            role = "father" if data.get("relationship_type") == "FATHER_OF" else "mother"
            warnings.append(
                f"Impossible: {child_data.get('person_name')} born before {role} "
                f"{parent_data.get('person_name')}"
            )
        elif child_year - parent_year < 12:
            warnings.append(
                f"Suspicious: {parent_data.get('person_name')} was less than 12 years "
                f"old when {child_data.get('person_name')} was born"
            )

    for _, data in G.nodes(data=True):
        birth = _year(data.get("birth_date"))
        death = _year(data.get("death_date"))

        if birth and death and death < birth:
            warnings.append(f"Impossible: {data.get('person_name')} died before being born")

    return warnings
