"""
Business Message Analyzer
=========================

Rule-based classification of business emails and chat inquiries:
    - fraud_rules.py     : weighted fraud indicator scan
    - risk_engine.py     : risk level thresholds
    - lead_scorer.py     : lead detection and quality score
    - intent.py          : intent priority cascade
    - decision_engine.py : decision table for actions and reply drafts
    - patterns.py        : shared rule pattern compilation
    - analyzer.py        : pipeline tying the stages together
    - models.py          : pydantic request/response schemas
    - auth.py            : optional API key check
    - main.py            : FastAPI application
"""
