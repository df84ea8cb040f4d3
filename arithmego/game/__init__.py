"""Core game rules: difficulty, questions, scoring, multiple choice and sessions."""