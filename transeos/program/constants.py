"""Constants for the TransEOS contracts."""

# =============================================================================
# Authorization
# =============================================================================

DEFAULT_PERMISSION = "active"

# =============================================================================
# Basic contract actions
# =============================================================================

ACTION_CREATE = "create"
ACTION_ISSUE = "issue"
ACTION_TRANSFER = "transfer"
ACTION_TRANSFER_FROM = "transferfrom"
ACTION_APPROVE = "approve"

# =============================================================================
# Exchange contract actions
# =============================================================================

ACTION_CREATE_ORDER = "createorder"
ACTION_EDIT_ORDER = "editorder"
ACTION_CANCEL_ORDER = "cancelorder"
ACTION_RETIRE_ORDER = "retireorder"
ACTION_SETTLE_ORDERS = "settleorders"

# Order fees are always charged in GIZMO with 8 decimals
FEE_SYMBOL = "GIZMO"
FEE_DECIMALS = 8

# =============================================================================
# Transaction policy
# =============================================================================

BROADCAST = True
BLOCKS_BEHIND = 3
EXPIRE_SECONDS = 60

# =============================================================================
# Name encoding
# =============================================================================

MAX_NAME_LEN = 13
MAX_SYMBOL_LEN = 7
U64_MASK = 0xFFFFFFFFFFFFFFFF
