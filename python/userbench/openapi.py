"""
OpenAPI schema generation and Swagger UI / ReDoc serving.
Builds an OpenAPI 3.1 document from the registered routes and their response models.
"""

import re
from typing import Any, Dict, List

from pydantic import TypeAdapter

REF_TEMPLATE = "#/components/schemas/{model}"


def generate_openapi_schema(
    title: str,
    version: str,
    routes: List[Dict[str, Any]],
    description: str = "",
) -> Dict[str, Any]:
    """
    Generate an OpenAPI 3.1 schema from registered routes.
    """
    paths: Dict[str, Any] = {}
    components: Dict[str, Any] = {"schemas": {}}

    for route in routes:
        method = route["method"].lower()
        path = route["path"]
        handler = route["handler"]
        name = route.get("name") or getattr(handler, "__name__", "unknown")

        operation: Dict[str, Any] = {
            "summary": name.replace("_", " ").title(),
            "operationId": name,
            "responses": {
                "200": {
                    "description": "Successful Response",
                    "content": {
                        "application/json": {
                            "schema": _response_schema(route.get("response_model"), components),
                        }
                    },
                }
            },
        }

        if route.get("tags"):
            operation["tags"] = route["tags"]

        if handler.__doc__:
            operation["description"] = handler.__doc__.strip()

        path_params = re.findall(r"\{(\w+)(?::\w+)?\}", path)
        if path_params:
            operation["parameters"] = [
                {"name": param, "in": "path", "required": True, "schema": {"type": "string"}}
                for param in path_params
            ]

        paths.setdefault(path, {})[method] = operation

    return {
        "openapi": "3.1.0",
        "info": {
            "title": title,
            "version": version,
            "description": description or f"{title} API",
        },
        "paths": paths,
        "components": components,
    }


def _response_schema(response_model: Any, components: Dict[str, Any]) -> Dict[str, Any]:
    "Convert a response model annotation into a schema, hoisting model definitions into components."
    if response_model is None:
        return {"type": "object"}

    schema = TypeAdapter(response_model).json_schema(
        by_alias=True, ref_template=REF_TEMPLATE, mode="serialization"
    )
    for model_name, definition in schema.pop("$defs", {}).items():
        components["schemas"].setdefault(model_name, definition)

    # A bare model comes back inline; store it and reference it instead.
    title = schema.get("title")
    if schema.get("type") == "object" and title and "properties" in schema:
        components["schemas"].setdefault(title, schema)
        return {"$ref": REF_TEMPLATE.format(model=title)}
    return schema


SWAGGER_UI_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>{title} - Swagger UI</title>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
        SwaggerUIBundle({{
            url: "{openapi_url}",
            dom_id: '#swagger-ui'
        }})
    </script>
</body>
</html>"""

REDOC_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>{title} - ReDoc</title>
    <meta charset="utf-8"/>
    <style>body {{ margin: 0; padding: 0; }}</style>
</head>
<body>
    <redoc spec-url='{openapi_url}'></redoc>
    <script src="https://unpkg.com/redoc@latest/bundles/redoc.standalone.js"></script>
</body>
</html>"""
