"""
Pattern content database.

One module per pattern, each holding a plain dict literal with an
``overview`` and a ``detailed`` section. Keys are snake_case; the models in
``clean_code_react.models`` turn them into camelCase on the wire.
"""

from .adapter import ADAPTER_PATTERN
from .builder import BUILDER_PATTERN
from .compound_component import COMPOUND_COMPONENT_PATTERN
from .container_presentational import CONTAINER_PRESENTATIONAL_PATTERN
from .declarative_programming import DECLARATIVE_PROGRAMMING_PATTERN
from .dependency_injection import DEPENDENCY_INJECTION_PATTERN
from .factory import FACTORY_PATTERN
from .higher_order_component import HIGHER_ORDER_COMPONENT_PATTERN
from .prop_drilling_solutions import PROP_DRILLING_SOLUTIONS_PATTERN
from .render_props import RENDER_PROPS_PATTERN
from .service_layer import SERVICE_LAYER_PATTERN
from .strategy import STRATEGY_PATTERN

# Insertion order is the listing order of get_patterns
PATTERN_DATA = {
    "container-presentational": CONTAINER_PRESENTATIONAL_PATTERN,
    "render-props": RENDER_PROPS_PATTERN,
    "compound-component": COMPOUND_COMPONENT_PATTERN,
    "higher-order-component": HIGHER_ORDER_COMPONENT_PATTERN,
    "dependency-injection": DEPENDENCY_INJECTION_PATTERN,
    "service-layer": SERVICE_LAYER_PATTERN,
    "adapter-pattern": ADAPTER_PATTERN,
    "declarative-programming": DECLARATIVE_PROGRAMMING_PATTERN,
    "prop-drilling-solutions": PROP_DRILLING_SOLUTIONS_PATTERN,
    "builder-pattern": BUILDER_PATTERN,
    "factory-pattern": FACTORY_PATTERN,
    "strategy-pattern": STRATEGY_PATTERN,
}

__all__ = ["PATTERN_DATA"]
