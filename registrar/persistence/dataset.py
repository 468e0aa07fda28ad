"""
Immutable in-memory dataset and the JSON loader that builds it.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from ..core.abstract_entity import AbstractRecord
from ..core.entities import RECORD_TYPES
from ..core.enums import EntityType
from ..core.exceptions import DatasetError

logger = logging.getLogger(__name__)


class Dataset:
    """All six collections, built once and never modified.
    
    Collections are tuples of records in file order. The raw document is
    kept so it can be served back unchanged.
    """
    
    def __init__(self, collections: Mapping[EntityType, Tuple[AbstractRecord, ...]],
                 raw: Mapping[str, Any]):
        self._collections = {entity_type: tuple(collections.get(entity_type, ()))
                             for entity_type in EntityType}
        self._raw = dict(raw)
    
    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "Dataset":
        """Build a dataset from a parsed JSON document."""
        if not isinstance(document, Mapping):
            raise DatasetError(
                "Dataset document must be a JSON object",
                details={"type": type(document).__name__}
            )
        document = copy.deepcopy(dict(document))
        
        collections: Dict[EntityType, Tuple[AbstractRecord, ...]] = {}
        for entity_type, record_type in RECORD_TYPES.items():
            rows = document.get(entity_type.value, [])
            if not isinstance(rows, list):
                raise DatasetError(
                    f"Collection '{entity_type.value}' must be a list",
                    details={"collection": entity_type.value}
                )
            records = []
            for position, row in enumerate(rows):
                if not isinstance(row, Mapping) or "id" not in row:
                    raise DatasetError(
                        f"Record {position} of '{entity_type.value}' must be an object with an id",
                        details={"collection": entity_type.value, "position": position}
                    )
                records.append(record_type(row))
            collections[entity_type] = tuple(records)
        
        return cls(collections, document)
    
    def collection(self, entity_type: EntityType) -> Tuple[AbstractRecord, ...]:
        """Records of one collection in insertion order."""
        return self._collections[entity_type]
    
    def counts(self) -> Dict[str, int]:
        return {entity_type.value: len(records)
                for entity_type, records in self._collections.items()}
    
    def to_dict(self) -> Dict[str, Any]:
        """The document the dataset was built from."""
        return copy.deepcopy(self._raw)
    
    def __len__(self) -> int:
        return sum(len(records) for records in self._collections.values())
    
    def __repr__(self) -> str:
        return f"Dataset({self.counts()})"


def load_dataset(path: Union[str, Path]) -> Dataset:
    """Read a dataset JSON file. Any problem aborts with DatasetError."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset file not found: {path}", details={"path": str(path)}) from e
    except json.JSONDecodeError as e:
        raise DatasetError(
            f"Dataset file is not valid JSON: {path} (line {e.lineno})",
            details={"path": str(path)}
        ) from e
    except OSError as e:
        raise DatasetError(f"Could not read dataset file {path}: {e}", details={"path": str(path)}) from e
    
    dataset = Dataset.from_dict(document)
    logger.info("Loaded dataset from %s: %s", path, dataset.counts())
    return dataset
