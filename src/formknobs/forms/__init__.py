"""Form schemas of the learning-management application.

Every schema is also registered in ``form_registry`` under a dotted name
such as ``classroom.upsert`` or ``lesson.reorder``.
"""

import logging

from formknobs.registry import SchemaRegistry

from .actions import FormOutcome, form_values, validate_form
from .approval import approval_decision_schema
from .classroom import classroom_status_enum, classroom_status_schema, upsert_classroom_schema
from .lesson import lesson_type_enum, reorder_lessons_schema, upsert_lesson_schema
from .membership import member_role_enum, remove_member_schema, update_member_schema
from .settings import branding_schema, enrollment_rules_schema, notifications_schema, roles_schema
from .subject import reorder_subjects_schema, subject_status_enum, upsert_subject_schema
from .tenant import tenant_status_enum, tenant_status_schema, upsert_tenant_schema

logger = logging.getLogger(__name__)

FORM_SCHEMAS = {
    "approval.decide": approval_decision_schema,
    "classroom.upsert": upsert_classroom_schema,
    "classroom.status": classroom_status_schema,
    "lesson.upsert": upsert_lesson_schema,
    "lesson.reorder": reorder_lessons_schema,
    "membership.update": update_member_schema,
    "membership.remove": remove_member_schema,
    "settings.branding": branding_schema,
    "settings.enrollment": enrollment_rules_schema,
    "settings.notifications": notifications_schema,
    "settings.roles": roles_schema,
    "subject.upsert": upsert_subject_schema,
    "subject.reorder": reorder_subjects_schema,
    "tenant.upsert": upsert_tenant_schema,
    "tenant.status": tenant_status_schema,
}

form_registry = SchemaRegistry("forms")
form_registry.register_schemas(FORM_SCHEMAS)
logger.info(f"Registered {len(FORM_SCHEMAS)} form schemas")

__all__ = [
    "FORM_SCHEMAS",
    "form_registry",
    "FormOutcome",
    "form_values",
    "validate_form",
    "approval_decision_schema",
    "classroom_status_enum",
    "classroom_status_schema",
    "upsert_classroom_schema",
    "lesson_type_enum",
    "reorder_lessons_schema",
    "upsert_lesson_schema",
    "member_role_enum",
    "remove_member_schema",
    "update_member_schema",
    "branding_schema",
    "enrollment_rules_schema",
    "notifications_schema",
    "roles_schema",
    "reorder_subjects_schema",
    "subject_status_enum",
    "upsert_subject_schema",
    "tenant_status_enum",
    "tenant_status_schema",
    "upsert_tenant_schema",
]
