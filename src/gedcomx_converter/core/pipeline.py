from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from gedcomx_converter.conversion import convert_tree
from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.core.exceptions import ConversionError
from gedcomx_converter.exporter import export_result_json
from gedcomx_converter.loader import load_tree
from gedcomx_converter.mapping.result import ConversionResult


class Pipeline:
    """
    Orchestrates load -> convert -> export.
    No business logic lives here.
    """

    def __init__(
        self,
        config: Any,
        logger: Any,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
    ):
        self.config = config
        self.log = logger
        self.input_path = input_path
        self.output_path = output_path
        self.ctx = ConversionContext(logger=logger)

    def run(self) -> ConversionResult:
        self.log.info("Pipeline starting: %s", self.input_path)

        try:
            tree = load_tree(self.input_path)
            result = convert_tree(tree, self.config, self.ctx)

            if self.output_path:
                export_result_json(result, self.output_path)

            self.log.info("Pipeline completed successfully")
            return result

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ConversionError(str(exc)) from exc
