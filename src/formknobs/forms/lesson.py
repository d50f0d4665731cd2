"""Lesson form schemas."""

from formknobs.validation import blank_to_none, z

lesson_type_enum = z.enum(["video", "pdf", "quiz", "assignment"])

upsert_lesson_schema = z.object({
    "id": z.string().uuid().optional(),
    "subjectId": z.string().uuid(),
    "title": z.string().min(3, "Title must be at least 3 characters long"),
    "description": z.string().transform(blank_to_none).optional(),
    "type": lesson_type_enum,
    "duration": z.string().optional(),
    "videoUrl": z.string().transform(blank_to_none).optional(),
    # Checkbox: present as "on" when ticked, absent otherwise
    "isFreePreview": z.literal("on").optional(),
})

reorder_lessons_schema = z.object({
    "subjectId": z.string().uuid(),
    "orderedIds": z.array(z.string().uuid()).min(1),
})
