"""Subject form schemas."""

from formknobs.validation import blank_to_none, z

subject_status_enum = z.enum([
    "draft",
    "published",
    "archived",
])

upsert_subject_schema = z.object({
    "id": z.string().uuid().optional(),
    "classroomId": z.string().uuid(),
    "title": z.string().min(3, "Title must be at least 3 characters long"),
    "description": z.string().transform(blank_to_none).optional(),
    "status": subject_status_enum.optional(),
})

reorder_subjects_schema = z.object({
    "classroomId": z.string().uuid(),
    "orderedIds": z.array(z.string().uuid()).min(1),
})
