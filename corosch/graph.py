"""Directed graph of named nodes, readable from a circuit file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional, Union

from corosch.task import Task


@dataclass(eq=False)
class Node:
    """A named vertex with its incoming and outgoing edges."""

    name: str = ""
    fanouts: List["Edge"] = field(default_factory=list, init=False, repr=False)
    fanins: List["Edge"] = field(default_factory=list, init=False, repr=False)
    task: Optional[Task] = field(default=None, init=False, repr=False)


@dataclass(eq=False, repr=False)
class Edge:
    """A directed edge between two nodes."""

    from_node: Node
    to_node: Node

    def __repr__(self) -> str:
        return f"Edge({self.from_node.name!r} -> {self.to_node.name!r})"


class Graph:
    """Nodes and edges, kept in insertion order."""

    def __init__(self) -> None:
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []

    @classmethod
    def from_file(cls, filename: Union[str, PathLike]) -> "Graph":
        """Read a circuit file.

        The file holds a node count, then that many node names written as
        ``"name";``, then edges written as ``"from" -> "to";``. Tokens are
        separated by whitespace; a trailing incomplete edge is ignored.
        """
        tokens = Path(filename).read_text().split()
        if not tokens:
            raise ValueError(f"{filename}: missing node count")
        try:
            count = max(int(tokens[0]), 0)
        except ValueError as exc:
            raise ValueError(f"{filename}: bad node count {tokens[0]!r}") from exc

        node_tokens = tokens[1 : 1 + count]
        if len(node_tokens) < count:
            raise ValueError(
                f"{filename}: expected {count} nodes, found {len(node_tokens)}"
            )

        graph = cls()
        by_name: Dict[str, Node] = {}
        for token in node_tokens:
            name = token[1:-2]
            by_name[name] = graph.insert_node(name)

        rest = iter(tokens[1 + count :])
        for source, _arrow, target in zip(rest, rest, rest):
            from_name = source[1:-1]
            to_name = target[1:-2]
            try:
                graph.insert_edge(by_name[from_name], by_name[to_name])
            except KeyError as exc:
                raise ValueError(
                    f"{filename}: edge refers to unknown node {exc.args[0]!r}"
                ) from exc
        return graph

    def insert_node(self, name: str = "") -> Node:
        """Add a node and return it."""
        node = Node(name)
        self.nodes.append(node)
        return node

    def insert_edge(self, from_node: Node, to_node: Node) -> Edge:
        """Add an edge between two nodes and return it."""
        edge = Edge(from_node, to_node)
        self.edges.append(edge)
        from_node.fanouts.append(edge)
        to_node.fanins.append(edge)
        return edge