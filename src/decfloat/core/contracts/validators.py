"""
JSON Schema Contract Validators

Wire-представление FloatResult envelope (FloatResult.to_wire) проверяется
по формальному контракту в contracts/schema/ перед отдачей наружу.

Схемы:
- float_result.json: {value} | {error: {kind, msg, readableMsg}}
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"

FLOAT_RESULT_SCHEMA = "float_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов из каталога пакета.

    Каждая схема читается один раз и проходит meta-validation по Draft 2020-12.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем в каталоге (без расширения)"""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения ('float_result')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных по одной схеме контракта"""

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Сообщения всех нарушений в виде 'path: message', отсортированные по пути"""
        errors = sorted(self.iter_errors(data), key=lambda err: list(map(str, err.path)))
        return [f"{'/'.join(map(str, err.path)) or '<root>'}: {err.message}" for err in errors]


class FloatResultValidator(ContractValidator):
    """Валидатор float_result контракта"""

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        super().__init__(FLOAT_RESULT_SCHEMA, loader)


@lru_cache(maxsize=None)
def _float_result_validator() -> FloatResultValidator:
    return FloatResultValidator()


def validate_float_result(data: Dict[str, Any]) -> None:
    """
    Проверка wire-представления FloatResult.

    Raises:
        ValidationError: Если данные не соответствуют float_result контракту
    """
    _float_result_validator().validate(data)
