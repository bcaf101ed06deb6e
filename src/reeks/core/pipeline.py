"""
This module defines the Pipeline class, which chains reeks operations.

A Pipeline is a sequence of Stages. Running it threads the source through
each stage in turn: lazy stages wrap the stream produced so far, so the
whole chain is still evaluated one element at a time, and an optional
terminal stage at the end drains it into a final value.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional, Tuple, Union
import time

from ..config import Config, load_config
from .errors import PipelineCompositionError
from .log import get_logger, set_level
from .sequence import KeyedStream, as_pairs
from .stage import Stage


class Pipeline:
    """A sequence of stages applied to a key/value sequence.

    Attributes:
        stages: A list of Stage objects that make up the pipeline.
        name: The name of the pipeline, used for logging.
        logger: A logger instance for the pipeline.
    """

    def __init__(
        self, stages: Optional[List[Stage]] = None, *, name: Optional[str] = None
    ):
        self.stages: List[Stage] = []
        self.name = name or "Pipeline"
        self.logger = get_logger(f"reeks.pipeline.{self.name}")
        for s in stages or []:
            self.add(s)

    def _check_connection(self, other: Any) -> List[Stage]:
        if isinstance(other, Stage):
            incoming = [other]
        elif isinstance(other, Pipeline):
            incoming = list(other.stages)
        else:
            upstream = self.stages[-1] if self.stages else None
            raise PipelineCompositionError(
                upstream, other, f"unsupported type for pipeline composition: {type(other)}"
            )

        if self.stages and incoming and self.stages[-1].is_terminal:
            raise PipelineCompositionError(
                self.stages[-1], incoming[0], "nothing can follow a terminal stage"
            )
        for previous, current in zip(incoming, incoming[1:]):
            if previous.is_terminal:
                raise PipelineCompositionError(
                    previous, current, "nothing can follow a terminal stage"
                )
        return incoming

    def add(self, other: Union[Stage, "Pipeline"]) -> "Pipeline":
        """Appends a Stage, or every stage of another Pipeline, in place.

        Returns:
            The pipeline instance, allowing for method chaining.

        Raises:
            PipelineCompositionError: If ``other`` is not a Stage or Pipeline,
                or if this pipeline already ends in a terminal stage.
        """
        self.stages.extend(self._check_connection(other))
        return self

    def __or__(self, other: Union[Stage, "Pipeline"]) -> "Pipeline":
        """Composes this pipeline with another component using the `|` operator.

        Returns:
            A new `Pipeline`; neither operand is modified.
        """
        incoming = self._check_connection(other)
        composed = Pipeline(name=self.name)
        composed.stages = self.stages + incoming
        return composed

    def __rshift__(self, other: Union[Stage, "Pipeline"]) -> "Pipeline":
        """Provides an alternative `>>` operator for pipeline composition."""
        return self.__or__(other)

    @property
    def is_terminal(self) -> bool:
        return bool(self.stages) and self.stages[-1].is_terminal

    def run(self, data: Iterable[Any], *, config_path: Optional[str] = None) -> Any:
        """Runs the pipeline over ``data``.

        Args:
            data: Any key/value sequence (see `as_pairs`).
            config_path: Optional YAML file used to resolve `ConfigValue`
                stage arguments. A ``logging.level`` entry sets the level of
                the ``reeks`` loggers.

        Returns:
            A lazy `KeyedStream` when every stage is lazy, otherwise the
            value returned by the terminal stage.
        """
        config = load_config(config_path)
        return self._run(data, config)

    def _run(self, data: Iterable[Any], config: Config) -> Any:
        if "logging.level" in config:
            set_level(config.get("logging.level"))

        self.logger.info("pipeline_run_started", stages=len(self.stages))
        start_time = time.time()
        result: Any = KeyedStream(as_pairs(data))
        try:
            for stage_obj in self.stages:
                result = stage_obj.apply_to(result, config)
            return result
        finally:
            # For a lazy pipeline this only measures how long wiring took.
            self.logger.info(
                "pipeline_run_finished",
                terminal=self.is_terminal,
                seconds=round(time.time() - start_time, 6),
            )

    def collect(
        self, data: Iterable[Any], *, config_path: Optional[str] = None
    ) -> Union[List[Tuple[Any, Any]], Any]:
        """Runs the pipeline and materializes a lazy result.

        Returns:
            A list of ``(key, value)`` pairs for lazy pipelines, or the
            terminal value unchanged.
        """
        result = self.run(data, config_path=config_path)
        if isinstance(result, KeyedStream):
            return list(result)
        return result

    def visualize(self) -> str:
        """Generates a DOT graph representation of the pipeline.

        The output can be rendered using Graphviz.

        Returns:
            A string containing the pipeline's structure in DOT format.
        """

        def escape_label(label: str) -> str:
            return label.replace('"', '\\"').replace("{", "\\{").replace("}", "\\}")

        dot_lines = ["digraph G {", "  rankdir=TB;"]
        dot_lines.append('  subgraph "cluster_main" {')
        dot_lines.append(f'    label = "{escape_label(self.name)}";')
        previous = None
        for index, stage_obj in enumerate(self.stages):
            node_id = f'"stage_{index}"'
            shape = "doubleoctagon" if stage_obj.is_terminal else "box"
            dot_lines.append(
                f'    {node_id} [label="{escape_label(stage_obj.name)}", shape={shape}];'
            )
            if previous:
                dot_lines.append(f"    {previous} -> {node_id};")
            previous = node_id
        dot_lines.append("  }")
        dot_lines.append("}")
        return "\n".join(dot_lines)

    def __repr__(self) -> str:
        stage_names = " | ".join(s.name for s in self.stages)
        return f"Pipeline(name='{self.name}', stages=[{stage_names}])"
