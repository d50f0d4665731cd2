"""Tenant (institute) form schemas."""

from formknobs.validation import z

tenant_status_enum = z.enum([
    "active",
    "pending_review",
    "suspended",
    "banned",
    "inactive",
])

upsert_tenant_schema = z.object({
    "id": z.string().uuid().optional(),
    "name": z.string().min(2, "Name must be at least 2 characters long"),
    "subdomain": z.string()
    .trim()
    .to_lower_case()
    .regex(r"^[a-z0-9-]{2,40}$", "Subdomain must be lowercase and alphanumeric (hyphens allowed)")
    .optional(),
    "status": tenant_status_enum.optional(),
})

tenant_status_schema = z.object({
    "tenantId": z.string().uuid(),
    "status": tenant_status_enum,
})
