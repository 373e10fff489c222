from .answer_result import AnswerResult

__all__ = ['AnswerResult']
