"""Layout engine that solves active constraints with kiwisolver."""

from __future__ import annotations

import logging

import kiwisolver
import numpy as np

from .core.constraint import Constraint
from .core.edges import LayoutAttribute, LayoutPriority, Relation
from .core.frame import Frame
from .core.view import View
from .errors import UnsatisfiableLayoutError

logger = logging.getLogger(__name__)


def priority_to_strength(priority: float) -> float:
    """Map a constraint priority in (0, 1000] to a kiwisolver strength.

    REQUIRED maps to a required constraint; every lower priority lands in
    the medium band so that ordering between priorities is preserved and
    stays above the weak strength used to keep unconstrained frames.
    """
    if priority >= LayoutPriority.REQUIRED:
        return kiwisolver.strength.required
    return kiwisolver.strength.create(0.0, priority, 0.0)


class _ViewVariables:
    """Solver variables of one view, in root coordinates."""

    def __init__(self, name: str) -> None:
        self.left = kiwisolver.Variable(f"{name}.left")
        self.top = kiwisolver.Variable(f"{name}.top")
        self.width = kiwisolver.Variable(f"{name}.width")
        self.height = kiwisolver.Variable(f"{name}.height")

    def expression(self, attribute: LayoutAttribute):
        if attribute is LayoutAttribute.LEFT:
            return self.left + 0
        if attribute is LayoutAttribute.TOP:
            return self.top + 0
        if attribute is LayoutAttribute.RIGHT:
            return self.left + self.width
        if attribute is LayoutAttribute.BOTTOM:
            return self.top + self.height
        if attribute is LayoutAttribute.WIDTH:
            return self.width + 0
        if attribute is LayoutAttribute.HEIGHT:
            return self.height + 0
        if attribute is LayoutAttribute.CENTER_X:
            return self.left + self.width * 0.5
        return self.top + self.height * 0.5


class LayoutEngine:
    """Solves the constraints of a view hierarchy and updates frames.

    Views that still translate their autoresizing mask keep their frame:
    it is added as required constraints. Views that opted into constraints
    get their frame from the solver; their previous frame is kept as a weak
    preference so that under-constrained views do not collapse.
    """

    def layout(self, root: View) -> None:
        """Lay out ``root`` and all of its descendants.

        Args:
            root: Top of the hierarchy to lay out. Its origin is fixed.

        Raises:
            UnsatisfiableLayoutError: If required constraints conflict
        """
        views = list(root.iter_views())
        variables = {id(view): _ViewVariables(view.name) for view in views}
        solver = kiwisolver.Solver()

        for view in views:
            for kiwi_constraint in self._frame_constraints(view, root, variables):
                solver.addConstraint(kiwi_constraint)

        constraints = [c for view in views for c in view.constraints]
        for constraint in constraints:
            try:
                solver.addConstraint(self._translate(constraint, variables))
            except kiwisolver.UnsatisfiableConstraint as exc:
                raise UnsatisfiableLayoutError(
                    f"{constraint!r} conflicts with other required constraints"
                ) from exc

        solver.updateVariables()

        for view in views:
            if view.translates_autoresizing_mask_into_constraints:
                continue
            view.frame = self._solved_frame(view, root, variables)

        logger.debug(
            "Laid out '%s': %d views, %d constraints",
            root.name, len(views), len(constraints),
        )

    def _frame_constraints(
        self, view: View, root: View, variables: dict[int, _ViewVariables]
    ) -> list[kiwisolver.Constraint]:
        """Constraints tying a view's variables to its current frame."""
        own = variables[id(view)]
        if view is root or view.superview is None:
            origin_left, origin_top = 0.0, 0.0
        else:
            parent = variables[id(view.superview)]
            origin_left, origin_top = parent.left, parent.top

        fixed = [
            own.left == origin_left + view.frame.min_x,
            own.top == origin_top + view.frame.min_y,
            own.width == view.frame.width,
            own.height == view.frame.height,
        ]
        if view is root:
            # The root's origin anchors the whole solution.
            return fixed[:2] + [
                c | self._frame_strength(view) for c in fixed[2:]
            ]
        return [c | self._frame_strength(view) for c in fixed]

    @staticmethod
    def _frame_strength(view: View) -> float:
        if view.translates_autoresizing_mask_into_constraints:
            return kiwisolver.strength.required
        return kiwisolver.strength.weak

    @staticmethod
    def _translate(
        constraint: Constraint, variables: dict[int, _ViewVariables]
    ) -> kiwisolver.Constraint:
        """Convert a constraint descriptor into a kiwisolver constraint."""
        lhs = variables[id(constraint.first_item)].expression(constraint.first_attribute)
        if constraint.second_item is None:
            rhs = constraint.constant
        else:
            second = variables[id(constraint.second_item)]
            rhs = (
                second.expression(constraint.second_attribute) * constraint.multiplier
                + constraint.constant
            )

        if constraint.relation is Relation.EQUAL:
            kiwi_constraint = lhs == rhs
        elif constraint.relation is Relation.LESS_THAN_OR_EQUAL:
            kiwi_constraint = lhs <= rhs
        else:
            kiwi_constraint = lhs >= rhs
        return kiwi_constraint | priority_to_strength(constraint.priority)

    @staticmethod
    def _solved_frame(
        view: View, root: View, variables: dict[int, _ViewVariables]
    ) -> Frame:
        own = variables[id(view)]
        absolute = np.array([own.left.value(), own.top.value()])
        if view is root or view.superview is None:
            origin = absolute
        else:
            parent = variables[id(view.superview)]
            origin = absolute - np.array([parent.left.value(), parent.top.value()])
        return Frame(origin=origin, size=np.array([own.width.value(), own.height.value()]))
