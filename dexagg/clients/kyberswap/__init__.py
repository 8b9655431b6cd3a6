from .client import DEADLINE_OFFSET_SECONDS, SLIPPAGE_TOLERANCE_BPS, KyberSwapClient

__all__ = ["DEADLINE_OFFSET_SECONDS", "SLIPPAGE_TOLERANCE_BPS", "KyberSwapClient"]
