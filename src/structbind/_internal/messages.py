"""Message templates shared by the binder and the schema base."""

UNKNOWN_FIELD_TEMPLATE = "Property {schema}.{field} doesn't exist!"
TYPE_MISMATCH_TEMPLATE = "Property {schema}.{field} must be {expected}, but {actual} given!"
MIXED_STRUCTURE_TEMPLATE = (
    "{schema}: mixing constructor-based and field-based schema declaration is not allowed."
)

DIAGNOSTICS_DISABLED_KEY = "warnings"
DIAGNOSTICS_DISABLED_TEMPLATE = (
    "Diagnostics are disabled for {schema_id}; "
    "error detail is only recorded after a lenient bind."
)

UNION_SEPARATOR = "|"
