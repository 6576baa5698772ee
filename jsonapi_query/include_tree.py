"""
Include trees

The `include` query parameter contains a csv list of (dotted) relationship paths, eg.
"comments,comments.author,author.articles". The paths are merged into a tree, where every
node maps relationship names to subtrees:

    {"comments": {"author": {}}, "author": {"articles": {}}}
"""
from collections.abc import Mapping
from typing import Dict, Iterator, List, Sequence


class IncludeTree(Mapping):
    """
    Immutable include tree node: relationship name => IncludeTree
    A leaf relationship maps to an empty tree.
    """

    __slots__ = ("_branches",)

    def __init__(self, branches=None) -> None:
        self._branches: Dict[str, IncludeTree] = {}
        for rel_name, subtree in (branches or {}).items():
            if not isinstance(subtree, IncludeTree):
                subtree = IncludeTree(subtree)
            self._branches[rel_name] = subtree

    @classmethod
    def leaf(cls, rel_name: str) -> "IncludeTree":
        return cls({rel_name: cls()})

    @classmethod
    def from_path(cls, path: Sequence[str]) -> "IncludeTree":
        """
        Create a single branch tree for a relationship path
        ["a", "b", "c"] => {a: {b: {c: {}}}}
        :param path: relationship names
        :return: IncludeTree
        """
        result = cls()
        for rel_name in reversed(path):
            result = cls({rel_name: result})
        return result

    def merge(self, other: "IncludeTree") -> "IncludeTree":
        """
        Merge two trees, branches with the same name are merged recursively
        :param other: IncludeTree
        :return: new IncludeTree containing the branches of both trees
        """
        branches = dict(self._branches)
        for rel_name, subtree in other.items():
            if rel_name in branches:
                subtree = branches[rel_name].merge(subtree)
            branches[rel_name] = subtree
        return IncludeTree(branches)

    def paths(self) -> List[str]:
        """
        :return: the dotted paths to the leaves of the tree
        """
        result = []
        for rel_name, subtree in self._branches.items():
            if not subtree:
                result.append(rel_name)
                continue
            result += [f"{rel_name}.{path}" for path in subtree.paths()]
        return result

    def to_dict(self) -> dict:
        return {rel_name: subtree.to_dict() for rel_name, subtree in self._branches.items()}

    def __getitem__(self, rel_name: str) -> "IncludeTree":
        return self._branches[rel_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._branches)

    def __len__(self) -> int:
        return len(self._branches)

    def __repr__(self) -> str:
        return f"IncludeTree({self.to_dict()!r})"
