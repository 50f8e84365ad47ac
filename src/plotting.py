"""Visualization functions for ancestor trees."""

from pathlib import Path

import pydot

from graph import AncestorTree


FILL_COLORS = {"M": "lightblue", "F": "lightpink"}


def _year(date: str | None) -> str:
    # Dates are cleaned up already ("1957", "1957-10", "1957-10-04")
    return date[:4] if date else ""


def build_ancestor_chart(tree: AncestorTree) -> pydot.Dot:
    """
    Build a Graphviz chart of an ancestor tree.

    - Ancestors appear above their descendants
    - Each person's father and mother share a rank
    - Boxes are colored by gender
    """
    G = tree.to_graph()

    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "BT")  # Bottom-to-top (root person at the bottom)
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    for node, data in G.nodes(data=True):
        label = (
            f"{data.get('person_name', '')}\n"
            f"{_year(data.get('birth_date'))}-{_year(data.get('death_date'))}"
        )
        P.add_node(
            pydot.Node(
                str(node),
                label=label,
                shape="box",
                style="rounded,filled",
                fillcolor=FILL_COLORS.get(data.get("sex"), "lightgray"),
                fontsize="10",
                penwidth="2" if node == tree.root_id else "1",
            )
        )

    # Edges point from child up to parent
    for parent, child, data in G.edges(data=True):
        P.add_edge(
            pydot.Edge(
                str(child),
                str(parent),
                color="steelblue" if data.get("relationship_type") == "FATHER_OF" else "palevioletred",
            )
        )

    # Keep each couple on the same rank
    for i, profile in enumerate(tree):
        father = tree.father_of(profile)
        mother = tree.mother_of(profile)
        if father is not None and mother is not None:
            sg = pydot.Subgraph(f"parents_{i}", rank="same")
            sg.add_node(pydot.Node(str(father.person_id)))
            sg.add_node(pydot.Node(str(mother.person_id)))
            P.add_subgraph(sg)

    return P


def plot_ancestors(tree: AncestorTree, output_path: Path | None = None):
    """
    Render an ancestor tree with Graphviz.

    Args:
        tree: The tree to draw
        output_path: Where to save the chart (png, svg, pdf or dot). If None, displays interactively.
    """
    P = build_ancestor_chart(tree)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext == "dot":
            output_path.write_text(P.to_string(), encoding="utf-8")
        else:
            if ext not in ("png", "svg", "pdf"):
                ext = "png"
            P.write(str(output_path), format=ext)
        print(f"Chart saved to {output_path}")
    else:
        # Save to temporary file and display
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            P.write(f.name, format="png")
            img = mpimg.imread(f.name)
            plt.figure(figsize=(20, 16))
            plt.imshow(img)
            plt.axis("off")
            plt.tight_layout()
            plt.show()
