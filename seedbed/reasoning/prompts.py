"""LLM prompts for query extraction, research and document generation."""

# Search Query Extraction Prompt
QUERY_EXTRACTION_PROMPT = """Given this startup idea:
Title: "{title}"{description_line}

Extract the best search queries to find competing/similar projects on each platform. Think about what the core product category is, what technical keywords describe it, and what developers would call it.

Return ONLY this JSON (no other text):
{{"github":"<2-4 word technical search for repos>","hn":"<2-4 word search for HN discussions>","npm":"<1-3 word package search>"}}

Examples:
- "AI-powered task manager for teams" → {{"github":"ai task manager","hn":"AI task management","npm":"task manager ai"}}
- "A platform that connects freelance designers" → {{"github":"freelance designer marketplace","hn":"freelance design platform","npm":"freelance marketplace"}}

JSON only:"""


# Pivot Suggestion Prompt
PIVOT_SUGGESTION_PROMPT = """Given the startup idea "{title}"{description_part} and these existing competitors:
{project_list}

Suggest exactly 3 short, actionable pivot ideas that differentiate from the competition. Each should be 1 sentence. Return ONLY a JSON array of 3 strings, no other text."""


# Research Report Prompt
RESEARCH_PROMPT = """You are a startup analyst. Analyze this idea: "{title}" ({description}).

Return ONLY this JSON (no other text):
{{"similarProjects":[{{"name":"Project1","url":"https://example1.com","description":"desc1","strengths":["s1","s2"]}},{{"name":"Project2","url":"https://example2.com","description":"desc2","strengths":["s1","s2"]}},{{"name":"Project3","url":"https://example3.com","description":"desc3","strengths":["s1","s2"]}}],"feasibilityAnalysis":{{"marketSize":"size","technicalComplexity":"medium","estimatedTimeToMVP":"3-6 months","challenges":["c1","c2"],"opportunities":["o1","o2"]}},"differentiationSuggestions":["d1","d2","d3"],"featureEnhancements":[{{"feature":"f1","description":"fd1","priority":"high","estimatedEffort":"2 weeks"}},{{"feature":"f2","description":"fd2","priority":"medium","estimatedEffort":"1 week"}}],"sources":[{{"title":"s1","url":"https://source1.com","snippet":"snippet1"}}]}}

Replace the placeholder values with real analysis for "{title}". JSON only:"""


# PRD Generation Prompts
PRD_SYSTEM_PROMPT = """You are an expert product manager. Generate a comprehensive Product Requirements Document (PRD) based on the idea and research findings provided.

Output ONLY the PRD content in markdown format, nothing else. No explanations, no "here's your PRD", just the raw document.

The PRD must follow this structure:

## Product Overview
[What the product is and the problem it solves - 2-3 sentences]

## Goals & Objectives
[What success looks like - 3-5 bullet points]

## Target Audience
[Who it's for - primary and secondary audiences]

## Core Features (MVP)
[Basic features needed to launch - numbered list of 4-6 essential features with brief descriptions]

## Enhanced Features
[Suggested features from research, each with priority (High/Medium/Low) and estimated effort]

## User Stories
[Key user flows written as "As a [user], I want to [action], so that [benefit]" - 4-6 stories]

## Technical Considerations
[Complexity, constraints, recommended tech stack, time to MVP estimate]

## Competitive Landscape
[Summary of similar projects and their strengths/weaknesses]

## Differentiation Strategy
[How this product stands out from competitors - 3-5 concrete strategies]

## Success Metrics
[KPIs to track - 4-6 measurable metrics]"""


PRD_USER_PROMPT = """Generate a Product Requirements Document (PRD) for:

IDEA: {title}
{research_context}
Create a detailed, comprehensive PRD following the exact structure specified. Make it specific, actionable, and grounded in the research findings."""


RESEARCH_CONTEXT_TEMPLATE = """
RESEARCH FINDINGS:
- Similar Projects: {similar_projects}
- Market Size: {market_size}
- Technical Complexity: {technical_complexity}
- Time to MVP: {time_to_mvp}
- Key Challenges: {challenges}
- Opportunities: {opportunities}
- Differentiation Ideas: {differentiation}
- Suggested Features: {features}
"""
