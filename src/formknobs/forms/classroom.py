"""Classroom form schemas."""

from formknobs.validation import blank_to_none, z

classroom_status_enum = z.enum([
    "draft",
    "pending_review",
    "published",
    "rejected",
    "banned",
])

upsert_classroom_schema = z.object({
    "id": z.string().uuid().optional(),
    "title": z.string().min(3, "Title must be at least 3 characters long"),
    "description": z.string().transform(blank_to_none).optional(),
    "capacity": z.string().optional(),
    "educatorId": z.string().uuid().optional(),
    "status": classroom_status_enum.optional(),
})

classroom_status_schema = z.object({
    "classroomId": z.string().uuid(),
    "status": classroom_status_enum,
})
