"""
Services - the engine's business logic

    rules/            Rule Catalog and duration formula
    learning/         Correction Store and learned-rule extraction
    enforcement/      Rule Enforcer
    preferences/      Preference Applier
    content_analysis/ Content Analyzer
    templates/        Template Selector and registry
    use_cases/        End-to-end review flow
"""
