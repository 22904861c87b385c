"""Static reference collections: documents, primary categories, tag dimensions.

These are the in-memory fixtures the resource APIs serve. Callers get deep
copies through ``ReferenceCatalog``; the module-level lists are never mutated.
"""

from __future__ import annotations

from doccat.models.category import CategorySelection
from doccat.models.document import Document, DocumentStatus
from doccat.models.tags import Tag, TagDimension

DOCUMENTS: list[Document] = [
    Document(
        id="doc_001",
        title="Q3 Product Roadmap Draft",
        content="Planned feature milestones for the third quarter, including the "
                "search revamp and the onboarding redesign.",
        summary="Internal roadmap covering Q3 product milestones.",
        created_at="2024-07-02",
        author_id="user_alice",
        status=DocumentStatus.PENDING,
    ),
    Document(
        id="doc_002",
        title="Customer Interview Notes: Retail Pilot",
        content="Transcribed notes from six interviews with pilot customers in the "
                "retail segment.",
        summary="Qualitative findings from the retail pilot interviews.",
        created_at="2024-07-10",
        author_id="user_bob",
        status=DocumentStatus.CATEGORIZING,
    ),
    Document(
        id="doc_003",
        title="Vendor Security Assessment",
        content="Security questionnaire responses and risk scoring for the new "
                "payments vendor.",
        summary="Risk assessment of the payments vendor's security posture.",
        created_at="2024-06-21",
        author_id="user_carol",
        status=DocumentStatus.COMPLETED,
    ),
    Document(
        id="doc_004",
        title="Onboarding Playbook",
        content="Step-by-step guide for onboarding new enterprise accounts.",
        summary="Operational playbook for enterprise onboarding.",
        created_at="2024-05-30",
        author_id="user_alice",
        status=DocumentStatus.PENDING,
    ),
    Document(
        id="doc_005",
        title="Pricing Experiment Results",
        content="Outcome of the annual-plan discount experiment across three regions.",
        summary="Results and recommendations from the pricing experiment.",
        created_at="2024-07-15",
        author_id="user_dave",
        status=DocumentStatus.COMPLETED,
    ),
]

CATEGORIES: list[CategorySelection] = [
    CategorySelection(
        id="strategic-planning",
        name="Strategic Planning",
        description="Roadmaps, plans and forward-looking decisions.",
        examples=["Product roadmaps", "Annual plans", "OKR documents"],
        is_high_value=True,
        impact="Shapes direction for multiple teams over several quarters.",
        detailed_description="Documents that commit resources or set priorities "
                             "beyond the current cycle.",
        processing_strategy="Route to leadership review and index for planning search.",
        business_value_classification="High",
    ),
    CategorySelection(
        id="customer-insight",
        name="Customer Insight",
        description="Research, interviews and feedback from customers.",
        examples=["Interview notes", "Survey results", "Support trend reports"],
        is_high_value=True,
        impact="Informs product and go-to-market decisions.",
        detailed_description="First-hand evidence about customer needs and behaviour.",
        processing_strategy="Extract themes and link to related product areas.",
        business_value_classification="High",
    ),
    CategorySelection(
        id="risk-compliance",
        name="Risk & Compliance",
        description="Assessments, audits and regulatory material.",
        examples=["Vendor assessments", "Audit findings", "Policy attestations"],
        is_high_value=True,
        impact="Protects the organisation from legal and security exposure.",
        detailed_description="Material that evidences controls or records risk decisions.",
        processing_strategy="Retain under compliance policy and restrict access.",
        business_value_classification="High",
    ),
    CategorySelection(
        id="operational",
        name="Operational",
        description="Procedures, playbooks and how-to guides.",
        examples=["Runbooks", "Onboarding guides", "Checklists"],
        is_high_value=False,
        impact="Keeps day-to-day work consistent.",
        processing_strategy="Publish to the internal knowledge base.",
        business_value_classification="Medium",
    ),
    CategorySelection(
        id="analytical",
        name="Analytical",
        description="Experiments, metrics and data analysis.",
        examples=["A/B test results", "Dashboard exports", "Forecasts"],
        is_high_value=False,
        impact="Provides evidence for incremental decisions.",
        processing_strategy="Attach source data references and index metrics.",
        business_value_classification="Medium",
    ),
    CategorySelection(
        id="general-reference",
        name="General Reference",
        description="Background material with no specific decision attached.",
        examples=["Meeting minutes", "Glossaries", "Archived notes"],
        is_high_value=False,
        impact="Useful context, low urgency.",
        processing_strategy="Index for search only.",
        business_value_classification="Standard",
    ),
]

TAG_DIMENSIONS: list[TagDimension] = [
    TagDimension(
        id="authorship",
        name="Authorship",
        description="Who produced the content.",
        multi_select=False,
        required=True,
        tags=[
            Tag(id="self-authored", name="Self-authored", description="Written by you", icon="user"),
            Tag(id="team-authored", name="Team-authored", description="Written by your team", icon="users"),
            Tag(id="external", name="External", description="Produced outside the organisation", icon="globe"),
        ],
    ),
    TagDimension(
        id="disclosure-risk",
        name="Disclosure Risk",
        description="Impact if the document were shared outside its audience.",
        multi_select=False,
        required=True,
        tags=[
            Tag(id="public", name="Public", description="Safe to publish", risk_level=1),
            Tag(id="internal", name="Internal", description="Fine inside the company", risk_level=2),
            Tag(id="confidential", name="Confidential", description="Limited audience", risk_level=3),
            Tag(id="restricted", name="Restricted", description="Named individuals only", risk_level=4),
        ],
    ),
    TagDimension(
        id="intended-use",
        name="Intended Use",
        description="What the document is for.",
        multi_select=True,
        required=True,
        tags=[
            Tag(id="decision-making", name="Decision making", description="Supports a decision"),
            Tag(id="reference", name="Reference", description="Kept for later lookup"),
            Tag(id="training", name="Training", description="Teaches a process or skill"),
            Tag(id="reporting", name="Reporting", description="Reports status or results"),
        ],
    ),
    TagDimension(
        id="audience",
        name="Audience",
        description="Who should read the document.",
        multi_select=True,
        required=False,
        tags=[
            Tag(id="leadership", name="Leadership", description="Executives and directors"),
            Tag(id="engineering", name="Engineering", description="Engineering teams"),
            Tag(id="sales", name="Sales", description="Sales and account teams"),
            Tag(id="all-staff", name="All staff", description="Everyone in the company"),
        ],
    ),
]

# category id -> dimension id -> suggested tag ids
TAG_SUGGESTIONS: dict[str, dict[str, list[str]]] = {
    "strategic-planning": {
        "disclosure-risk": ["confidential"],
        "intended-use": ["decision-making"],
        "audience": ["leadership"],
    },
    "customer-insight": {
        "disclosure-risk": ["internal"],
        "intended-use": ["reference", "decision-making"],
        "audience": ["sales", "engineering"],
    },
    "risk-compliance": {
        "disclosure-risk": ["restricted"],
        "intended-use": ["reporting"],
        "audience": ["leadership"],
    },
    "operational": {
        "disclosure-risk": ["internal"],
        "intended-use": ["training", "reference"],
        "audience": ["all-staff"],
    },
}
