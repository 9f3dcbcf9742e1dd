"""Category hierarchy.

CategoryTree rebuilds the bounded-depth, bounded-fanout category
hierarchy from the flat list stored in the database and enforces the
tree-shape rules on every node.
"""

from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from catalog_api.domain.entities import Category
from catalog_api.domain.exceptions import ValidationError
from catalog_api.domain.limits import DEFAULT_LIMITS, CatalogLimits


def _has_unique_display_orders(categories: Iterable[Category]) -> bool:
    orders = [c.display_order for c in categories]
    return len(orders) == len(set(orders))


def _sort_by_display_order(categories: Iterable[Category]) -> list[Category]:
    # sorted() is stable, so equal display orders keep input order
    return sorted(categories, key=lambda c: c.display_order)


# ============================================================================
# Tree Node
# ============================================================================


@dataclass(frozen=True)
class CategoryTreeNode:
    """One category and its child categories.

    Attributes:
        category: The category at this node.
        children: Child nodes, ordered by display order.
        depth: 1 for roots, 2 for their children, and so on.
    """

    category: Category
    children: tuple["CategoryTreeNode", ...]
    depth: int

    @classmethod
    def create(
        cls,
        category: Category,
        children: list["CategoryTreeNode"] | tuple["CategoryTreeNode", ...],
        depth: int,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated tree node.

        Raises:
            ValidationError: If the depth is out of range, there are too
                many children, or a child does not belong under this node.
        """
        if depth < 1 or depth > limits.max_tree_depth:
            raise ValidationError(
                f"Category hierarchy is limited to {limits.max_tree_depth} levels",
                field="depth",
            )

        if len(children) > limits.max_children_per_category:
            raise ValidationError(
                "A category can have at most "
                f"{limits.max_children_per_category} child categories",
                field="children",
            )

        for child in children:
            if child.depth != depth + 1:
                raise ValidationError(
                    "Child category depth is inconsistent", field="children"
                )

        for child in children:
            if child.category.parent_id != category.id:
                raise ValidationError(
                    "Child category parent id does not match", field="children"
                )

        if not _has_unique_display_orders(c.category for c in children):
            raise ValidationError(
                "Display order must be unique among categories with the same parent",
                field="children",
            )

        return cls(category=category, children=tuple(children), depth=depth)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator["CategoryTreeNode"]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


# ============================================================================
# Tree
# ============================================================================


@dataclass(frozen=True)
class CategoryTree:
    """The whole category hierarchy.

    Attributes:
        roots: Root nodes, ordered by display order.
    """

    roots: tuple[CategoryTreeNode, ...]

    @classmethod
    def create(
        cls,
        roots: list[CategoryTreeNode] | tuple[CategoryTreeNode, ...],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated tree from root nodes.

        Raises:
            ValidationError: If a root is not at depth 1 or has a parent,
                there are too many roots, or root display orders clash.
        """
        for root in roots:
            if root.depth != 1:
                raise ValidationError("Root node depth must be 1", field="roots")
            if root.category.parent_id is not None:
                raise ValidationError(
                    "Root category must not have a parent", field="roots"
                )

        if len(roots) > limits.max_root_categories:
            raise ValidationError(
                f"At most {limits.max_root_categories} root categories are allowed",
                field="roots",
            )

        if not _has_unique_display_orders(r.category for r in roots):
            raise ValidationError(
                "Display order must be unique among root categories", field="roots"
            )

        return cls(roots=tuple(roots))

    @classmethod
    def from_flat_list(
        cls,
        categories: Iterable[Category],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Build the tree from a flat list of categories.

        Categories are grouped by parent id and nodes are built depth
        first from the roots, each sibling group sorted by display order.
        Categories whose parent is not in the list are not reachable from
        a root and are left out of the tree.

        Args:
            categories: Every category, in any order.
            limits: Tree bounds.

        Returns:
            Validated CategoryTree.

        Raises:
            ValidationError: If the resulting shape breaks a tree rule,
                including chains deeper than the depth limit.
        """
        children_by_parent: dict[str | None, list[Category]] = defaultdict(list)
        for category in categories:
            children_by_parent[category.parent_id].append(category)

        def build_node(category: Category, depth: int) -> CategoryTreeNode:
            if depth > limits.max_tree_depth:
                raise ValidationError(
                    f"Category hierarchy is limited to {limits.max_tree_depth} levels",
                    field="depth",
                )
            children = [
                build_node(child, depth + 1)
                for child in _sort_by_display_order(children_by_parent.get(category.id, []))
            ]
            return CategoryTreeNode.create(category, children, depth, limits)

        roots = [
            build_node(root, 1)
            for root in _sort_by_display_order(children_by_parent.get(None, []))
        ]
        return cls.create(roots, limits)

    def walk(self) -> Iterator[CategoryTreeNode]:
        """Yield every node in pre-order."""
        for root in self.roots:
            yield from root.walk()

    def flatten(self) -> list[Category]:
        """Return all categories in pre-order."""
        return [node.category for node in self.walk()]

    def find(self, category_id: str) -> CategoryTreeNode | None:
        """Return the node for a category, or None if it is not in the tree."""
        for node in self.walk():
            if node.category.id == category_id:
                return node
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())
