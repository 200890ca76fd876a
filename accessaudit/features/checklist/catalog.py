from accessaudit.features.checklist.models.checklist_item import ChecklistCategory
from accessaudit.features.checklist.schemas.checklist import ChecklistItemCreate

DEFAULT_CHECKLIST_ITEMS = [
    ChecklistItemCreate(
        category=ChecklistCategory.VISION,
        title="All meaningful images have descriptive alt text",
        description='Decorative images should have empty alt="" attributes. Complex images need detailed descriptions.',
        wcag_reference="WCAG 1.1.1",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.VISION,
        title="Color contrast meets WCAG AA standards (4.5:1 ratio)",
        description="Large text (18pt+) needs 3:1 ratio. Use online contrast checkers to verify.",
        wcag_reference="WCAG 1.4.3",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.VISION,
        title="Content is accessible to screen readers",
        description="Test with actual screen reader software or browser extensions.",
        wcag_reference="WCAG 1.3.1",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.VISION,
        title="Text can be resized to 200% without loss of functionality",
        description="Test browser zoom and ensure all content remains accessible and readable.",
        wcag_reference="WCAG 1.4.4",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.HEARING,
        title="Videos feature captions",
        description="All pre-recorded videos must have synchronized captions.",
        wcag_reference="WCAG 1.2.2",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.MOTOR,
        title="All interactive elements accessible via keyboard",
        description="Test complete functionality using only keyboard navigation.",
        wcag_reference="WCAG 2.1.1",
    ),
    ChecklistItemCreate(
        category=ChecklistCategory.COGNITIVE,
        title="Content structured with clear headings",
        description="Use proper heading hierarchy and logical page structure.",
        wcag_reference="WCAG 1.3.1",
    ),
]
