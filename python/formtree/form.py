from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Mapping, Optional

from jinja2 import Template

from formtree.config import FormConfig
from formtree.editors.registry import EditorRegistry, default_registry
from formtree.logging import get_logger
from formtree.tree import (
    ChangeDispatcher,
    CompileContext,
    Node,
    ValueOptions,
    clear_errors,
    compile_schema,
    get_value,
    render,
    resolve_pointer,
    set_errors,
    set_value,
)
from formtree.tree.nodes import ChangeListener

logger = get_logger(__name__)


class Form:
    """
    A compiled schema together with everything the field tree needs at run time.

    The schema is compiled right away, editors are attached by 'render()'. Values
    are accessible only after that.
    """

    def __init__(
        self,
        schema: Dict[str, Any],
        config: Optional[FormConfig] = None,
        registry: Optional[EditorRegistry] = None,
    ) -> None:
        self.original_schema = copy.deepcopy(schema)
        self.config = config or FormConfig()
        self.registry = registry or default_registry()
        self.dispatcher = ChangeDispatcher()
        self.context = CompileContext(self.registry, self.dispatcher, self.config.native_date_input)

        self.root: Node = compile_schema(schema, self.context)
        logger.debug(f"compiled form with root {self.root!r}")

    @property
    def value_options(self) -> ValueOptions:
        return ValueOptions(
            keep_null_values=self.config.keep_null_values,
            ignore_missing_value=self.config.ignore_missing_value,
        )

    @property
    def rendered(self) -> bool:
        return self.root.rendered

    def render(self) -> Form:
        render(self.root)
        logger.debug("form rendered")
        return self

    def get_value(self, options: Optional[ValueOptions] = None) -> Any:
        return get_value(self.root, options or self.value_options)

    def set_value(self, value: Any, options: Optional[ValueOptions] = None) -> None:
        set_value(self.root, value, options or self.value_options)

    def set_errors(self, errors: Optional[Iterable[Mapping[str, Any]]], template: Optional[Template] = None) -> None:
        set_errors(self.root, errors, self.config.pointer_attr_name, self.config.message_attr_name, template)

    def clear_errors(self) -> None:
        clear_errors(self.root)

    def field(self, pointer: str) -> Node:
        return resolve_pointer(self.root, pointer)

    def subscribe(self, listener: ChangeListener) -> None:
        self.root.subscribe(listener)
