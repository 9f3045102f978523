"""Footprint analysis: resolves wall roles, span and width."""

from __future__ import annotations
import logging

from roofcalc.errors import ValidationError
from roofcalc.models import RoofContext, WallPosition


logger = logging.getLogger(__name__)


class WallAnalyzer:
    """Resolves which walls carry the roof and how far apart they are."""

    def analyze(self, context: RoofContext) -> None:
        """Run all analysis passes and populate the context."""
        self._resolve_walls(context)
        context.span = self._compute_span(context)
        context.width = self._compute_width(context)
        logger.debug(
            "Footprint resolved: span=%.4f width=%.4f gables=%d",
            context.span, context.width, len(context.gables),
        )

    def _resolve_walls(self, context: RoofContext) -> None:
        walls = context.walls
        if not walls:
            raise ValidationError("walls", "At least one wall is required")

        ids = [w.id for w in walls]
        if len(set(ids)) != len(ids):
            raise ValidationError("walls", "Wall ids must be unique")

        fronts = context.walls_at(WallPosition.FRONT)
        backs = context.walls_at(WallPosition.BACK)
        if len(fronts) != 1 or len(backs) != 1:
            raise ValidationError(
                "walls",
                "Exactly one front wall and one back wall must carry the roof "
                f"(got {len(fronts)} front, {len(backs)} back)",
            )

        gables = []
        for position in (WallPosition.LEFT, WallPosition.RIGHT):
            found = context.walls_at(position)
            if len(found) > 1:
                raise ValidationError(
                    "walls", f"More than one {position.value} gable wall"
                )
            gables.extend(found)

        context.front = fronts[0]
        context.back = backs[0]
        context.gables = gables

    def _compute_span(self, context: RoofContext) -> float:
        """Explicit span if given, else the mean gable wall length."""
        if context.params.span is not None:
            span = context.params.span
        elif context.gables:
            span = sum(g.length for g in context.gables) / len(context.gables)
        else:
            raise ValidationError(
                "span", "Span is undefined: no gable walls and no explicit span"
            )

        if span <= 0:
            raise ValidationError("span", "Span must be greater than 0")
        if context.params.span is None:
            for gable in context.gables:
                if gable.length <= 0:
                    raise ValidationError(
                        "wallLength", f"Wall '{gable.id}' length must be greater than 0"
                    )
        return span

    def _compute_width(self, context: RoofContext) -> float:
        """Ridge length: mean of the two ridge-bearing wall lengths."""
        for wall in (context.front, context.back):
            if wall.length <= 0:
                raise ValidationError(
                    "wallLength", f"Wall '{wall.id}' length must be greater than 0"
                )
        return (context.front.length + context.back.length) / 2
