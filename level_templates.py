# Built-in template bank, one block per difficulty level.
# Each question template carries exactly one {concept} placeholder;
# answer_hints[i] belongs to templates[i].

PLACEHOLDER = "{concept}"

QA_TEMPLATES = {
    "Recall": {
        "templates": [
            "Define the term **{concept}**.",
            "What is the main function of **{concept}** in the system?",
            "List the safety prerequisites for using **{concept}**.",
        ],
        "answer_hints": [
            "Provide the precise definition.",
            "State the primary role.",
            "List 3-5 necessary safety steps.",
        ],
        "description": "Tests basic definitions, safety, and function.",
    },
    "Procedure": {
        "templates": [
            "Describe the step-by-step process for performing **{concept}**.",
            "What is the correct sequence of tools required to complete **{concept}**?",
            "Justify the need for step 3 when executing **{concept}**.",
        ],
        "answer_hints": [
            "Outline 5-7 numbered steps.",
            "List tools in order, with justification.",
            "Explain the technical or safety reason.",
        ],
        "description": "Tests knowledge of sequences, steps, and process justification.",
    },
    "Troubleshooting": {
        "templates": [
            "If a system fails to initiate after performing **{concept}**, "
            "what are the first three checks you would perform?",
            "A client reports a common issue related to **{concept}**. "
            "Explain a logical diagnostic pathway.",
            "What potential hazards or errors are introduced if the tolerance for "
            "**{concept}** is ignored?",
        ],
        "answer_hints": [
            "List three logical steps for fault isolation.",
            "Outline a flow chart of checks.",
            "Identify the specific risk.",
        ],
        "description": "Tests fault diagnosis, logical thinking, and risk assessment.",
    },
}
