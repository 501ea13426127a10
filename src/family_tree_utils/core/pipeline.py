from __future__ import annotations

from family_tree_utils.analyzers import run_analyzer
from family_tree_utils.core.context import AnalysisContext
from family_tree_utils.core.exceptions import (
    AnalysisError,
    PipelineExecutionError,
)
from family_tree_utils.loader import parse_gedcom


class Pipeline:
    """
    Parse -> analyze, once per request.
    No business logic lives here.
    """

    def __init__(self, context: AnalysisContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> str:
        self.log.info("Pipeline starting: %s on %s", self.ctx.analyzer, self.ctx.input_path)

        # Read errors and unknown analyzers are already meaningful to the caller.
        graph = parse_gedcom(self.ctx.input_path)

        self.ctx.stats["individuals"] = len(graph.individuals)
        self.ctx.stats["families"] = len(graph.families)

        try:
            report = run_analyzer(
                self.ctx.analyzer,
                graph,
                title_codes=self.ctx.title_codes,
            )
        except AnalysisError:
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineExecutionError(str(exc)) from exc

        self.log.info("Pipeline completed successfully")
        return report
