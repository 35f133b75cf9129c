"""Instruction templates sent alongside the user's photo."""

from __future__ import annotations

_COMPOSITION_RULES = """Composition Rules to Consider:
- Rule of Thirds
- Leading Lines
- Symmetry
- Centered Composition
- Framing Within a Frame
- Depth & Layers
- Negative Space
- Diagonals and Triangles
- Golden Ratio / Fibonacci Spiral
- Eye-Level vs. Low/High Angle
- Fill the Frame
- Rule of Odds
- Rule of Space (e.g., for moving subjects or gaze direction)
- Juxtaposition
- Color Composition (e.g., complementary colors, analogous colors, color harmony, color contrast for mood)
- Texture & Pattern (how they contribute to visual interest and mood)
- Light as Subject (e.g., chiaroscuro, silhouettes, lens flares, god rays)
- Negative vs. Positive Space Balance
- Implied Lines
- Visual Weight & Balance"""

_OUTPUT_CONTRACT = """Structure your response STRICTLY as a JSON object with three keys:
- "analysisText": (string) Your textual analysis.
- "suggestedBoundingBox": (object or null) The bounding box object if Option A is chosen, otherwise null.
- "cinematicConceptPrompt": (string or null) The image generation prompt if Option B is chosen, otherwise null.

Ensure that "analysisText" is always provided. Either "suggestedBoundingBox" OR "cinematicConceptPrompt" should be non-null, but NOT BOTH. If neither specific output type is applicable (very rare), both can be null."""

_EXAMPLES = """Example 1 (Crop):
{
  "analysisText": "To capture a more cinematic frame from your photo of the Golden Gate Bridge, focus tightly on the iconic red tower. By applying the Rule of Thirds and placing the tower off-center, and using the bridge's structure as leading lines, we draw the viewer's eye. This creates a dramatic, mysterious, and focused composition.",
  "suggestedBoundingBox": { "x": 0.25, "y": 0.10, "width": 0.50, "height": 0.80 },
  "cinematicConceptPrompt": null
}

Example 2 (Concept Prompt):
{
  "analysisText": "While your current wide shot of the beach is pleasant, to make it truly cinematic, let's envision a more focused and dramatic scene using Depth & Layers. A simple crop won't capture this effectively. Instead, imagine a foreground element like a weathered piece of driftwood, the main subject (a lone figure) in the midground, and the ocean stretching to the horizon in the background.",
  "suggestedBoundingBox": null,
  "cinematicConceptPrompt": "Golden hour shot, cinematic depth of field. Foreground: weathered driftwood. Midground: lone figure walking along pristine sandy beach, footprints leading towards the ocean. Background: calm sea and distant sunset. Soft, warm lighting. Peaceful, serene, and slightly melancholic cinematic mood. Fujifilm film emulation. Consider Rule of Space for the walking figure."
}"""

_ANALYZE_TEMPLATE = """You are an expert cinematographer and photo editor. Analyze the provided image.
Your goal is to help the user achieve a more cinematic result.

When performing your analysis and making suggestions, consider the following established photographic and cinematographic composition rules. If any of these rules are particularly relevant to your analysis or could significantly enhance the cinematic quality of the image, mention them in your "analysisText". Explain how applying a rule (or how a rule is already present) contributes to the cinematic feel. Only suggest rules if they genuinely improve the shot; do not force them.

""" + _COMPOSITION_RULES + """

1. **Textual Analysis (Mandatory):** Provide detailed textual analysis (2-4 paragraphs) explaining how to find/create a cinematic shot.
   - If a direct crop of the *uploaded image* can achieve this, describe the elements to focus on, the composition rules that justify your crop, the mood, the storytelling, and the reframing.
   - If a direct crop is NOT ideal or sufficient (the image is too busy, lacks a clear subject, or needs a conceptual change), explain why. Then describe a *vision* for a cinematic shot inspired by the scene. This vision will be used to generate a new image.

2. **Cinematic Output (Choose ONE):**
   * **Option A: Suggested Bounding Box (for cropping)**
     If a direct crop of the uploaded image is the best approach, provide a "suggestedBoundingBox" object defining the ideal cinematic frame *within the original image*.
     - It must have keys "x", "y", "width", "height" (fractions 0.0-1.0).
     - Values must be valid: width/height > 0, x/y >= 0, x+width <= 1.0, y+height <= 1.0.
     - If you choose this option, "cinematicConceptPrompt" MUST be null.
   * **Option B: Cinematic Concept Prompt (for image generation)**
     If a crop is not ideal, provide a "cinematicConceptPrompt" string for an AI image generation model.
     - Make it highly descriptive: scene, style, lighting, camera angle, mood, key elements, and the composition principles at play.
     - If you choose this option, "suggestedBoundingBox" MUST be null.

""" + _OUTPUT_CONTRACT + """

""" + _EXAMPLES + """
"""

_TEMPLATES = {
    "analyze": _ANALYZE_TEMPLATE,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES.get(task, _ANALYZE_TEMPLATE)


def build_analysis_prompt() -> str:
    """Instruction paired with every analysis request; the image is attached separately."""
    return get_prompt_template("analyze")


def get_all_templates() -> dict[str, str]:
    return dict(_TEMPLATES)
