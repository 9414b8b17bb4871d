from zfs_savings_matrix.domain.models.app_config import AppConfig
from zfs_savings_matrix.domain.models.pair import Pair
from zfs_savings_matrix.domain.models.savings_matrix import SavingsMatrix

__all__ = [
    "AppConfig",
    "Pair",
    "SavingsMatrix",
]
