from .config import SummarizerConfig, DEFAULT_CONFIG, STOPWORDS, Strategy, InvalidConfiguration
from .datatypes import Sentence, RankedSentence, SimilarityGraph, FrequencyTable, ScoreVector
from .preprocessing import split_sentences, segment, tokenize, is_stopword, content_tokens
from .features import build_frequencies, score_sentence, sentence_similarity
from .graphing import build_similarity_graph, build_similarity_matrix
from .scoring import rank_graph, score_sentences
from .summarize import summarize, rank_sentences, select_sentences, target_count
from .readability import (ReadabilityReport, analyze, word_count, char_count, sentence_count,
                          syllable_count, reading_ease, reading_time)
