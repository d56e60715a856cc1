from quizbank.services.question_bank import QuestionBankService

__all__ = [
    "QuestionBankService",
]
