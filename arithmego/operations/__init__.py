"""Arithmetic operations that generate and score their own questions, and their registry."""