"""Downloadable CSV template for question imports."""

TEMPLATE_FILENAME = "exam_template.csv"

TEMPLATE_HEADERS: tuple[str, ...] = (
    "question",
    "type",
    "optionA",
    "optionB",
    "optionC",
    "optionD",
    "correctAnswers",
)

SAMPLE_CSV = "\n".join(
    [
        ",".join(TEMPLATE_HEADERS),
        '"Is the sky blue?",true-false,True,False,,,A',
        '"Which of these are fruits?",multiple,Apple,Car,Orange,Train,A|C',
        '"What is the capital of India?",single,Mumbai,Delhi,Kolkata,Chennai,B',
        '"Which programming language is this course about?",single,Python,JavaScript,Java,C++,B',
        '"Select all even numbers:",multiple,2,3,4,5,A|C',
    ]
)
