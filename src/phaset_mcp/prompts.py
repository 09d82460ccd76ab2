"""
Text returned by the 'suggest_manifest' tool.

The collected files and the schema are wrapped in a single markdown document
that ends with the generation instructions for the consuming model.
"""
from typing import Iterable

from .collector.schema import CollectedFile

PROMPT_TEMPLATE = """You are helping generate a Phaset manifest (phaset.manifest.json) for a software repository.

**Your task:**
1. Analyze the provided files
2. Generate a valid RecordUpdate JSON object following the Phaset schema EXACTLY
3. Mark fields you cannot infer as "TODO: MANUAL"
4. Provide your inference notes SEPARATELY after the JSON

**Critical Rules - Schema Validation:**
- The manifest MUST conform to the OpenAPI RecordUpdate schema exactly
- Do NOT add any custom fields or properties not defined in the schema
- Do NOT include "inference_notes", "confidence", "comments" or any metadata fields in the JSON
- Only use fields and values that are explicitly defined in the OpenAPI specification
- All enum values must match the schema exactly (case-sensitive)
- All required fields must be present: spec (with repo and name)

**Critical Rules - Inference:**
- Do NOT hallucinate organizational IDs (repo, group, system, domain)
- Do NOT guess data sensitivity or business criticality
- Be conservative: omit fields rather than guess incorrectly
- Mark uninferable values as "TODO: MANUAL" as a placeholder string value
- For organizational IDs (group, system, domain): use "TODO: 8-CHAR-ID" or omit entirely
- For repo: use "TODO: ORG_ID/RECORD_ID" format

**Output Format:**
You MUST provide your response in exactly this structure:

```json
{
  "spec": {
    "repo": "...",
    "name": "..."
    // ... only valid RecordUpdate fields
  }
  // ... other valid top-level RecordUpdate fields only
}
```

## Inference Notes

[Provide your analysis here as text, NOT in the JSON]

- **Field name**: Confidence level (HIGH/MEDIUM/LOW/MANUAL) - Explanation
- Example: **spec.name**: HIGH - Found in package.json
- Example: **spec.group**: MANUAL - Cannot determine organizational group ID from files

Generate the manifest now:"""


def render_files_context(files: Iterable[CollectedFile]) -> str:
    """One fenced block per file, in collection order."""
    return "\n\n".join(f"### File: {f.path}\n```\n{f.content}\n```\n" for f in files)


def render_suggestion(root: str, schema: str, files: list) -> str:
    return f"""# Phaset Manifest Generation for {root}

I've collected {len(files)} files from the repository. Let me analyze them to generate a Phaset manifest.

## Phaset Integration API Schema

{schema}

---

## Repository Files

{render_files_context(files)}

---

{PROMPT_TEMPLATE}"""


def render_empty_suggestion(root: str) -> str:
    return f"""I couldn't find any relevant files in the repository at {root}.

This might mean:
- The path is incorrect
- This is not a software repository
- The repository uses an unsupported structure

Please verify the path and try again."""
