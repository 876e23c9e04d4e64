"""
Question Ingestion Pipeline
generation/

Turns raw generative-model output into validated quiz questions.

Steps:
1. Format Router        — pick the delimited parser or the JSON path, with fallback
2. Delimited Parser     — "### QUESTION n ###" blocks, line-prefix state machine
3. JSON Extractor       — brace-balanced scan for the outer JSON object
4. JSON Parser          — "questions" array → ParsedQuestion records
5. Validator            — drop structurally incomplete records
6. Quiz Master          — generator backends (LLM-backed or stub)
"""
