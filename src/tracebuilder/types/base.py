"""Base model class for all tracebuilder models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BuilderBaseModel(BaseModel):
    """Base model for all tracebuilder models with built-in serialization.
    
    Provides common functionality for all tracebuilder models including:
    - Serialization to dictionary via to_dict()
    - Serialization to saved-query JSON (camelCase keys) via to_query_json()
    - Validation from saved-query JSON by alias or by field name
    """
    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.
        
        Returns:
            Dictionary with snake_case keys, ``None`` values dropped
        """
        return self.model_dump(mode="json", by_alias=False, exclude_none=True)

    def to_query_json(self) -> Dict[str, Any]:
        """Convert model to the camelCase layout stored in saved queries.
        
        Returns:
            Dictionary with camelCase keys, ``None`` values dropped
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
