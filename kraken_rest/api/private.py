"""
Private user data, trading and funding APIs.

Every builder here produces a signed POST request; sending one requires a
client constructed with credentials.
"""
from enum import Enum

from kraken_rest.api.builder import ApiBuilder


class PrivateMethod(Enum):
    """List of private methods."""
    # User data
    ADD_EXPORT = "AddExport"
    BALANCE = "Balance"
    CLOSED_ORDERS = "ClosedOrders"
    EXPORT_STATUS = "ExportStatus"
    LEDGERS = "Ledgers"
    OPEN_ORDERS = "OpenOrders"
    OPEN_POSITIONS = "OpenPositions"
    QUERY_LEDGERS = "QueryLedgers"
    QUERY_ORDERS = "QueryOrders"
    QUERY_TRADES = "QueryTrades"
    REMOVE_EXPORT = "RemoveExport"
    RETRIEVE_EXPORT = "RetrieveExport"
    TRADE_BALANCE = "TradeBalance"
    TRADE_VOLUME = "TradeVolume"
    TRADES_HISTORY = "TradesHistory"
    # User trading
    ADD_ORDER = "AddOrder"
    CANCEL_ALL = "CancelAll"
    CANCEL_ORDER = "CancelOrder"
    CANCEL_ALL_ORDERS_AFTER = "CancelAllOrdersAfter"
    # User funding
    DEPOSIT_ADDRESSES = "DepositAddresses"
    DEPOSIT_METHODS = "DepositMethods"
    DEPOSIT_STATUS = "DepositStatus"
    WALLET_TRANSFER = "WalletTransfer"
    WITHDRAW = "Withdraw"
    WITHDRAW_CANCEL = "WithdrawCancel"
    WITHDRAW_INFO = "WithdrawInfo"
    WITHDRAW_STATUS = "WithdrawStatus"
    # Websockets authentication
    GET_WEBSOCKETS_TOKEN = "GetWebSocketsToken"

    def __str__(self) -> str:
        return self.value


# --- User Data ---

def balance() -> ApiBuilder:
    """Get account balance."""
    return ApiBuilder.private(PrivateMethod.BALANCE)


def trade_balance() -> ApiBuilder:
    """Get trade balance."""
    return ApiBuilder.private(PrivateMethod.TRADE_BALANCE)


def open_orders() -> ApiBuilder:
    """Get open orders."""
    return ApiBuilder.private(PrivateMethod.OPEN_ORDERS)


def closed_orders() -> ApiBuilder:
    """Get closed orders."""
    return ApiBuilder.private(PrivateMethod.CLOSED_ORDERS)


def query_orders() -> ApiBuilder:
    """Query orders info."""
    return ApiBuilder.private(PrivateMethod.QUERY_ORDERS)


def trades_history() -> ApiBuilder:
    """Get trades history."""
    return ApiBuilder.private(PrivateMethod.TRADES_HISTORY)


def query_trades() -> ApiBuilder:
    """Query trades info."""
    return ApiBuilder.private(PrivateMethod.QUERY_TRADES)


def open_positions() -> ApiBuilder:
    """Get open positions."""
    return ApiBuilder.private(PrivateMethod.OPEN_POSITIONS)


def ledgers() -> ApiBuilder:
    """Get ledgers info."""
    return ApiBuilder.private(PrivateMethod.LEDGERS)


def query_ledgers() -> ApiBuilder:
    """Query ledgers."""
    return ApiBuilder.private(PrivateMethod.QUERY_LEDGERS)


def trade_volume() -> ApiBuilder:
    """Get trade volume."""
    return ApiBuilder.private(PrivateMethod.TRADE_VOLUME)


def add_export() -> ApiBuilder:
    """Request export report."""
    return ApiBuilder.private(PrivateMethod.ADD_EXPORT)


def export_status() -> ApiBuilder:
    """Get export statuses."""
    return ApiBuilder.private(PrivateMethod.EXPORT_STATUS)


def retrieve_export() -> ApiBuilder:
    """Get export report."""
    return ApiBuilder.private(PrivateMethod.RETRIEVE_EXPORT)


def remove_export() -> ApiBuilder:
    """Remove export report."""
    return ApiBuilder.private(PrivateMethod.REMOVE_EXPORT)


# --- User Trading ---

def add_order() -> ApiBuilder:
    """Add standard order."""
    return ApiBuilder.private(PrivateMethod.ADD_ORDER)


def cancel_order() -> ApiBuilder:
    """Cancel open order."""
    return ApiBuilder.private(PrivateMethod.CANCEL_ORDER)


def cancel_all() -> ApiBuilder:
    """Cancel all open orders."""
    return ApiBuilder.private(PrivateMethod.CANCEL_ALL)


def cancel_all_after() -> ApiBuilder:
    """Cancel all orders when the timeout expires."""
    return ApiBuilder.private(PrivateMethod.CANCEL_ALL_ORDERS_AFTER)


# --- User Funding ---

def deposit_methods() -> ApiBuilder:
    """Get deposit methods."""
    return ApiBuilder.private(PrivateMethod.DEPOSIT_METHODS)


def deposit_addresses() -> ApiBuilder:
    """Get deposit addresses."""
    return ApiBuilder.private(PrivateMethod.DEPOSIT_ADDRESSES)


def deposit_status() -> ApiBuilder:
    """Get status of recent deposits."""
    return ApiBuilder.private(PrivateMethod.DEPOSIT_STATUS)


def withdraw_info() -> ApiBuilder:
    """Get withdrawal information."""
    return ApiBuilder.private(PrivateMethod.WITHDRAW_INFO)


def withdraw() -> ApiBuilder:
    """Withdraw funds."""
    return ApiBuilder.private(PrivateMethod.WITHDRAW)


def withdraw_status() -> ApiBuilder:
    """Get status of recent withdrawals."""
    return ApiBuilder.private(PrivateMethod.WITHDRAW_STATUS)


def withdraw_cancel() -> ApiBuilder:
    """Request withdrawal cancellation."""
    return ApiBuilder.private(PrivateMethod.WITHDRAW_CANCEL)


def wallet_transfer() -> ApiBuilder:
    """Transfer from the spot to the futures wallet."""
    return ApiBuilder.private(PrivateMethod.WALLET_TRANSFER)


# --- Websockets Authentication ---

def get_websockets_token() -> ApiBuilder:
    """Get a token to connect to and authenticate with the Websockets API."""
    return ApiBuilder.private(PrivateMethod.GET_WEBSOCKETS_TOKEN)
