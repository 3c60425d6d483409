"""AWS Lambda entrypoints of the inventory functions.

Point each function's handler setting at one of ``create_inventory``,
``fetch_inventory``, ``list_inventory`` or ``delete_inventory`` in this module.

The process context is built while this module is imported, during the Lambda
init phase, so a ``ConfigurationError`` fails the init and no request is ever
handled by a misconfigured process.
"""

from ivms_inventory.handlers.adapter import (
    CREATE_INVENTORY,
    DELETE_INVENTORY,
    FETCH_INVENTORY,
    LIST_INVENTORY,
)
from ivms_inventory.handlers.lambdas import bootstrap, build_lambda_handler

context = bootstrap()

create_inventory = build_lambda_handler(CREATE_INVENTORY, context)
fetch_inventory = build_lambda_handler(FETCH_INVENTORY, context)
list_inventory = build_lambda_handler(LIST_INVENTORY, context)
delete_inventory = build_lambda_handler(DELETE_INVENTORY, context)
