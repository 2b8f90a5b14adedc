from fastapi import Depends

from resilink.core.audit import AuditLogger
from resilink.core.database import AsyncSessionLocal
from resilink.core.store import RecordStore
from resilink.services.alerts import AlertService
from resilink.services.incidents import IncidentService
from resilink.services.reports import ReportService
from resilink.services.resources import ResourceService


def get_store() -> RecordStore:
    return RecordStore(AsyncSessionLocal)


def get_audit_logger(store: RecordStore = Depends(get_store)) -> AuditLogger:
    return AuditLogger(store)


def get_incident_service(
    store: RecordStore = Depends(get_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> IncidentService:
    return IncidentService(store, audit)


def get_alert_service(
    store: RecordStore = Depends(get_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> AlertService:
    return AlertService(store, audit)


def get_resource_service(
    store: RecordStore = Depends(get_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> ResourceService:
    return ResourceService(store, audit)


def get_report_service(
    store: RecordStore = Depends(get_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> ReportService:
    return ReportService(store, audit)
