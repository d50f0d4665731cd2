"""Institute membership form schemas."""

from formknobs.validation import z

member_role_enum = z.enum(["owner", "admin", "teacher", "student", "banned"])

update_member_schema = z.object({
    "tenantId": z.string().uuid(),
    "userId": z.string().uuid(),
    "role": member_role_enum,
})

remove_member_schema = z.object({
    "tenantId": z.string().uuid(),
    "userId": z.string().uuid(),
})
