"""mindset_server — FastAPI REST API for the mindset analysis SDK.

Exposes the analysis endpoint (LLM-generated mindset report) and the
PDF report endpoint, plus a health probe.
"""
