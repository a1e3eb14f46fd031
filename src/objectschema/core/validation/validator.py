#!/usr/bin/env python3
"""
Purpose:
    Runs a field's ordered rule declarations against a single value and
    returns human-readable failure messages. One Validator is built per
    Document from its schema's validator config; the owning document is
    passed explicitly on every call so rules can inspect sibling fields.
"""
from __future__ import annotations

import inspect
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template
from loguru import logger

from objectschema.core.validation.rules import BUILTIN_RULES, DEFAULT_MESSAGES, FALLBACK_MESSAGE, Rule

# Keys of a rule declaration that are not passed to the rule as options
_DECLARATION_KEYS = frozenset({"validator", "message", "condition"})

_ENV = Environment(autoescape=False, undefined=StrictUndefined)


class Validator:
    """
    Rule executor.

    Config:
        validators: custom rules by name; these override built-ins of the same name
        fail_fast:  stop after the first failing rule of a declaration list

    Example:
        >>> v = Validator(validators={"even": lambda value, options, ctx: value % 2 == 0})
        >>> asyncio.run(v.validate(3, [{"validator": "even", "message": "{{ value }} is odd"}]))
        ['3 is odd']
    """

    def __init__(self, validators: Optional[Mapping[str, Rule]] = None, fail_fast: bool = False, **_: Any):
        self.rules: Dict[str, Rule] = {**BUILTIN_RULES, **(validators or {})}
        self.fail_fast = fail_fast

    async def validate(
        self,
        value: Any,
        validations: Optional[Iterable[Mapping[str, Any]]],
        *,
        context: Any = None,
    ) -> List[str]:
        """
        Run `validations` in order against `value`.

        Returns:
            Failure messages (empty list = valid).

        Raises:
            LookupError: if a declaration names an unknown validator.
            Any exception raised by a rule, condition or message template.
        """
        messages: List[str] = []
        for declaration in validations or ():
            name = declaration["validator"]
            rule = self._rule(name)
            options = {k: v for k, v in declaration.items() if k not in _DECLARATION_KEYS}

            condition = declaration.get("condition")
            if condition is not None and not await _resolve(condition(context, value)):
                continue

            if await _resolve(rule(value, options, context)):
                continue

            messages.append(self._message(name, declaration.get("message"), value, options))
            if self.fail_fast:
                break

        if messages:
            logger.debug(f"Value {value!r} failed {len(messages)} rule(s)")
        return messages

    # --- Helpers --- #

    def _rule(self, name: str) -> Rule:
        try:
            return self.rules[name]
        except KeyError:
            raise LookupError(f"Unknown validator {name!r}") from None

    @staticmethod
    def _message(name: str, message: Optional[str], value: Any, options: Dict[str, Any]) -> str:
        source = message or DEFAULT_MESSAGES.get(name, FALLBACK_MESSAGE)
        # `value` and `validator` always refer to the checked value and rule name
        return _template(source).render({**options, "value": value, "validator": name})


# --- Internals --- #

@lru_cache(maxsize=256)
def _template(source: str) -> Template:
    return _ENV.from_string(source)


async def _resolve(result: Any) -> Any:
    """Await `result` if a rule or condition returned an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result
