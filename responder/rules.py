"""
Fixed response rules.

This file exists to keep status and probing policy in one place.
"""

STATUS_OK = 200
STATUS_CREATED = 201
SUCCESS_STATUS_RANGE = range(200, 300)

# Probed, in order, on the resource wrapper and then on its domain object.
RESOURCE_KEY_METHOD = "get_resource_key"
# Last-resort key source on the domain object.
TABLE_METHOD = "get_table"
CREATED_FLAG = "was_recently_created"
