from __future__ import annotations

SYSTEM_PROMPT = (
    "You are an expert product manager and user story mapping specialist. "
    "You always answer with a single valid JSON object and nothing else."
)

_SHAPE = """{
  "title": "Product Title",
  "description": "Product Description",
  "epics": [
    {
      "title": "Epic Title",
      "description": "Epic Description",
      "features": [
        {
          "title": "Feature Title",
          "description": "Feature Description",
          "tasks": [
            {
              "title": "Task Title",
              "description": "Task Description",
              "priority": "high|medium|low",
              "effort": "X days",
              "acceptance_criteria": ["Criteria 1", "Criteria 2", "Criteria 3"]
            }
          ]
        }
      ]
    }
  ]
}"""

_GUIDELINES = """GUIDELINES:

1. USER STORIES (tasks)
   - Focus on user value and business outcomes.
   - Write from the user's perspective: "As a [user], I want [goal] so that [benefit]".
   - Keep them specific, actionable and testable, with clear acceptance criteria.

2. ENABLING STORIES (supporting requirements)
   - Do not just rephrase user stories.
   - Work out which technical infrastructure the product actually needs and write
     enabling stories that directly support the user stories above.
   - Pick categories based on the product type:

     WEB APPLICATIONS: authentication and authorization, database design and
     optimization, API development and security, frontend framework setup, CI/CD,
     monitoring and logging, caching and CDN, SSL, rate limiting, input validation.

     MOBILE APPLICATIONS: app framework setup, backend API, push notifications,
     offline data synchronization, app store deployment, device compatibility
     testing, mobile performance monitoring.

     ENTERPRISE APPLICATIONS: role-based access control, audit logging and
     compliance, backup and disaster recovery, integration with existing systems,
     scalability and load balancing, GDPR / SOC2 compliance.

     E-COMMERCE APPLICATIONS: payment gateway, inventory management, order
     processing, customer data management, shipping integration, fraud detection.

     SOCIAL / MEDIA APPLICATIONS: content moderation, real-time communication,
     media storage and CDN, privacy and data protection, scalable content
     delivery, likes / comments / sharing.

3. EPIC STRUCTURE
   - 3-5 epics covering the main functional areas.
   - ALWAYS include an epic titled "Infrastructure & Technical" for the enabling stories.
   - 2-4 features per epic, 3-6 tasks per feature.

4. PRIORITY AND EFFORT
   - Priority follows business value and user impact.
   - Effort is realistic, 1-5 days per task.
   - Enabling stories are often medium priority but critical for delivery.

5. ACCEPTANCE CRITERIA
   - User stories: user behaviour and outcomes.
   - Enabling stories: technical requirements, performance metrics, system capabilities.
   - Make them specific and measurable."""


def build_story_map_prompt(product_description: str) -> str:
    return (
        "Generate a comprehensive user story map from a product description.\n"
        "The response must be a valid JSON object with exactly this structure:\n\n"
        f"{_SHAPE}\n\n"
        f"{_GUIDELINES}\n\n"
        f"Generate a user story map for this product: {product_description}\n\n"
        "Return ONLY the JSON object, no additional text or explanations."
    )
