"""Institute settings form schemas."""

import re

from formknobs.validation import blank_to_none, z

HEX_COLOR = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

branding_schema = z.object({
    "tenantId": z.string().uuid(),
    "name": z.string().min(2, "Institute name must be at least 2 characters long"),
    "logoUrl": z.string().transform(blank_to_none).optional(),
    "primaryColor": z.string().regex(HEX_COLOR, "Invalid hex color").optional(),
})

enrollment_rules_schema = z.object({
    "tenantId": z.string().uuid(),
    "autoApprove": z.literal("on").optional(),
    "requireReason": z.literal("on").optional(),
})

notifications_schema = z.object({
    "tenantId": z.string().uuid(),
    "emailDigest": z.literal("on").optional(),
    "slackHook": z.string().transform(blank_to_none).optional(),
})

roles_schema = z.object({
    "tenantId": z.string().uuid(),
    "defaultRole": z.enum(["student", "teacher"]),
    "allowSelfUpgrade": z.literal("on").optional(),
})
