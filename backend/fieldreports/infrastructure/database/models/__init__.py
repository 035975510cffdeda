from .report import ReportModel
from .master_data import PartNumberMasterModel, SerialNumberMasterModel

__all__ = [
    "ReportModel",
    "PartNumberMasterModel",
    "SerialNumberMasterModel",
]
