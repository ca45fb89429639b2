class RpcDecodeError(Exception):
    """Raised when an RPC frame cannot be turned back into a message."""

    pass


class RpcCallError(Exception):
    """Raised when the RPC listener answers with a non-OK transport status."""

    def __init__(self, rpc_status: str, message: str) -> None:
        self.rpc_status = rpc_status
        super().__init__(f"RPC status {rpc_status}: {message}")
