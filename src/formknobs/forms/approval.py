"""Approval moderation form schemas."""

from formknobs.validation import blank_to_none, z

approval_decision_schema = z.object({
    "approvalId": z.string().uuid(),
    "decision": z.enum(["approved", "rejected"]),
    "reason": z.string().transform(blank_to_none).optional(),
})
