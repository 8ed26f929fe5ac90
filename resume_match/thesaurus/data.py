"""Hand-curated synonym table.

Entries are not symmetric: "manager" lists "owner" but there is no
"owner" entry, and "scrum" lists "ceremonies" with no entry back. Lookups
must go through
SynonymThesaurus.are_synonyms, which checks both directions.
"""

from typing import Dict, Tuple

SYNONYMS: Dict[str, Tuple[str, ...]] = {
    # Product management roles
    "product": ("product", "products"),
    "manager": ("manager", "owner", "lead", "director", "head"),
    "product manager": ("product owner", "product lead", "pm", "product director", "product head"),
    "product owner": ("product manager", "product lead", "po", "product director", "product head"),
    "product lead": ("product manager", "product owner", "pm", "po"),
    "pm": ("product manager", "product owner", "product lead"),
    "po": ("product owner", "product manager", "product lead"),

    # Project management
    "project manager": ("project lead", "program manager", "project coordinator", "project director"),
    "program manager": ("project manager", "project lead", "program lead"),
    "scrum master": ("agile coach", "scrum lead", "agile lead"),

    # Methodologies
    "agile": ("scrum", "kanban", "lean", "sprint"),
    "scrum": ("agile", "kanban", "sprint", "ceremonies"),
    "kanban": ("agile", "scrum", "lean"),
    "lean": ("agile", "scrum", "kanban"),
    "sprint": ("agile", "scrum", "iteration"),

    # Engineering
    "software": ("dev", "engineer", "development", "programming", "coding", "tech"),
    "development": ("dev", "engineering", "programming", "coding", "software"),
    "engineering": ("development", "dev", "programming", "coding", "software"),
    "programming": ("coding", "development", "software", "engineering"),
    "coding": ("programming", "development", "software", "engineering"),

    # Business
    "e-commerce": ("ecommerce", "ecomm", "online retail", "retail", "commerce"),
    "ecommerce": ("e-commerce", "ecomm", "online retail", "retail", "commerce"),
    "business": ("commercial", "enterprise", "corporate"),
    "strategy": ("strategic", "planning", "roadmap"),
    "roadmap": ("strategy", "planning", "strategic"),

    # AI
    "ai": ("artificial intelligence", "machine learning", "ml", "deep learning"),
    "artificial intelligence": ("ai", "machine learning", "ml"),
    "machine learning": ("ai", "ml", "artificial intelligence"),
    "ml": ("machine learning", "ai", "artificial intelligence"),

    # Design
    "ux": ("user experience", "usability", "user research"),
    "ui": ("user interface", "interface", "design"),
    "user experience": ("ux", "usability"),
    "user interface": ("ui", "interface"),

    # Cloud platforms
    "aws": ("amazon web services", "cloud", "amazon cloud"),
    "gcp": ("google cloud platform", "google cloud", "cloud"),
    "azure": ("microsoft azure", "cloud"),
    "cloud": ("aws", "gcp", "azure", "cloud computing"),

    # Analytics
    "analytics": ("analysis", "data analysis", "tracking", "metrics"),
    "analysis": ("analytics", "data analysis", "analyze"),
    "data": ("analytics", "analysis", "metrics", "insights"),
    "metrics": ("analytics", "data", "kpi", "measurement"),
    "kpi": ("metrics", "analytics", "measurement"),

    # Management
    "budget": ("budgets", "financial", "cost", "finance"),
    "team": ("teams", "group", "squad", "crew"),
    "leadership": ("lead", "manage", "management", "leading"),
    "management": ("manage", "leadership", "leading"),
    "lead": ("leadership", "manage", "management"),

    # Tools
    "jira": ("atlassian", "ticketing", "project tracking"),
    "confluence": ("atlassian", "documentation", "wiki"),
    "slack": ("communication", "messaging", "chat"),
    "github": ("git", "version control", "repository"),
    "git": ("github", "version control", "repository"),

    # Certifications
    "csm": ("certified scrum master", "scrum master"),
    "pmp": ("project management professional", "project manager"),
    "mba": ("master of business administration", "business degree"),
}
