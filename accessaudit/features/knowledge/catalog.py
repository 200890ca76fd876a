from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticleCreate

DEFAULT_KNOWLEDGE_ARTICLES = [
    KnowledgeArticleCreate(
        title="Web Accessibility Fundamentals: A Complete Beginner's Guide",
        content="Learn the basics of web accessibility, why it matters, and how to get started with WCAG compliance.",
        category="Getting Started",
        read_time=5,
    ),
    KnowledgeArticleCreate(
        title="Manual vs Automated Accessibility Testing: When to Use Each",
        content=(
            "Understanding the strengths and limitations of different testing approaches "
            "for comprehensive accessibility evaluation."
        ),
        category="Testing Methods",
        read_time=8,
    ),
    KnowledgeArticleCreate(
        title="WCAG 2.2 New Success Criteria: What Changed and How to Comply",
        content="Deep dive into the new WCAG 2.2 requirements and practical implementation strategies for compliance.",
        category="WCAG Guidelines",
        read_time=12,
    ),
    KnowledgeArticleCreate(
        title="ADA Compliance for Websites: Legal Requirements and Best Practices",
        content="Navigate the legal landscape of web accessibility and understand your obligations under the ADA.",
        category="Legal Compliance",
        read_time=10,
    ),
    KnowledgeArticleCreate(
        title="Essential Accessibility Testing Tools: Free and Paid Options",
        content="Comprehensive guide to the best accessibility testing tools available for different budgets and needs.",
        category="Tools & Resources",
        read_time=6,
    ),
    KnowledgeArticleCreate(
        title="Real-World Accessibility Fixes: E-commerce Site Makeover",
        content=(
            "Step-by-step case study of transforming an inaccessible e-commerce site "
            "into a WCAG AA compliant experience."
        ),
        category="Case Studies",
        read_time=15,
    ),
]
