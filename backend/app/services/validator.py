"""
规则校验服务

声明式规则写法与控制器一致:
    {"name": "required", "address": "required|max:255"}

每组规则会被编译成一个 pydantic 动态模型（带缓存），
pydantic 的 ValidationError 再被翻译成 {field, validation, message} 列表。
"""
import logging
from functools import lru_cache
from typing import Annotated, Any, Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import AfterValidator, BaseModel, Field, ValidationError, create_model
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = "{rule} validation failed on {field}"

Rule = Tuple[str, Optional[str]]


def _required(value: Any, arg: Optional[str]) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _string(value: Any, arg: Optional[str]) -> bool:
    return value is None or isinstance(value, str)


def _max(value: Any, arg: Optional[str]) -> bool:
    if not isinstance(value, str):
        return True
    return len(value) <= int(arg)


RULES: Dict[str, Callable[[Any, Optional[str]], bool]] = {
    "required": _required,
    "string": _string,
    "max": _max,
}


def parse_rules(rule_string: str) -> Tuple[Rule, ...]:
    """'required|max:255' -> (('required', None), ('max', '255'))"""
    parsed = []
    for chunk in rule_string.split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, arg = chunk.partition(":")
        if name not in RULES:
            raise ValueError(f"Unknown validation rule '{name}'")
        if name == "max" and not arg.isdigit():
            raise ValueError(f"Rule 'max' needs an integer argument, got '{arg}'")
        parsed.append((name, arg or None))
    return tuple(parsed)


def _field_checker(field: str, rules: Tuple[Rule, ...]):
    def check(value):
        for rule, arg in rules:
            if not RULES[rule](value, arg):
                raise PydanticCustomError(rule, MESSAGE_TEMPLATE, {"rule": rule, "field": field})
        return value
    return check


@lru_cache(maxsize=64)
def _build_model(rule_set: Tuple[Tuple[str, Tuple[Rule, ...]], ...]) -> type:
    fields = {}
    for field, rules in rule_set:
        annotated = Annotated[Any, AfterValidator(_field_checker(field, rules))]
        fields[field] = (annotated, Field(default=None, validate_default=True))
    return create_model("RuleModel", **fields)


class Validation:
    """一次校验的结果"""

    def __init__(self, errors: Optional[List[Dict[str, str]]] = None):
        self._errors = errors or []

    def fails(self) -> bool:
        return bool(self._errors)

    def messages(self) -> List[Dict[str, str]]:
        return list(self._errors)

    def __repr__(self):
        return f"<Validation fails={self.fails()} errors={len(self._errors)}>"


class Validator:
    """规则校验器"""

    def validate(self, data: Mapping[str, Any], rules: Mapping[str, str]) -> Validation:
        rule_set = tuple((field, parse_rules(rule_string)) for field, rule_string in rules.items())
        model: type[BaseModel] = _build_model(rule_set)

        if not isinstance(data, Mapping):
            data = {}

        try:
            model.model_validate(dict(data))
        except ValidationError as e:
            errors = [
                {
                    "field": str(err["loc"][0]),
                    "validation": err["type"],
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            logger.debug(f"Validation failed: {errors}")
            return Validation(errors)

        return Validation()
