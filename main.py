from __future__ import annotations
import streamlit as st
import re
import io
import logging
import math
import pandas as pd
import numpy as np
from typing import Dict, List
import matplotlib.pyplot as plt
import networkx as nx

from text_summarizer.config import Strategy, InvalidConfiguration
from text_summarizer.datatypes import RankedSentence, SimilarityGraph
from text_summarizer.graphing import build_similarity_graph
from text_summarizer.preprocessing import split_sentences
from text_summarizer.readability import analyze
from text_summarizer.summarize import summarize, rank_sentences, select_sentences, target_count

logger = logging.getLogger(__name__)

SAMPLE_TEXT = """Artificial intelligence (AI) refers to the simulation of human intelligence in machines that are programmed to think like humans and mimic their actions. The term may also be applied to any machine that exhibits traits associated with a human mind such as learning and problem-solving. As the field of AI continues to progress, it encompasses a variety of subfields, including machine learning, natural language processing, computer vision, and robotics. These disciplines collectively aim to build systems capable of performing tasks that typically require human intelligence, ranging from recognizing speech and images to making decisions under uncertainty.

In recent years, deep learning has driven remarkable advancements by leveraging large datasets and powerful computational resources. Neural networks with many layers can automatically learn hierarchical representations of data, enabling breakthroughs in areas such as image recognition, machine translation, and game playing. However, these advancements also raise concerns about interpretability, bias, and ethical use. Ensuring fairness, transparency, and accountability in AI systems has become a critical area of research and policy.

Businesses and governments are increasingly adopting AI to improve efficiency, personalize services, and drive innovation. From healthcare diagnostics and autonomous vehicles to financial forecasting and smart infrastructure, AI is transforming industries. To harness its benefits while mitigating risks, stakeholders must collaborate across disciplines to develop robust standards, invest in education, and prioritize responsible deployment."""

NO_SUMMARY = "(No summary produced)"

STRATEGY_LABELS = {
    Strategy.FREQUENCY: "Word frequency",
    Strategy.GRAPH: "TextRank (similarity graph)",
}

def extract_markdown_text(md_content: str) -> str:
    """Strip the Markdown markup that would otherwise leak into sentences."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'[*_`]{1,2}([^*_`]+)[*_`]{1,2}', r'\1', text)
    return text.strip()

def load_text_from_file(uploaded_file) -> str:
    content = uploaded_file.read().decode("utf-8")
    if uploaded_file.name.lower().endswith(".md"):
        return extract_markdown_text(content)
    return content

def format_reading_ease(value: float) -> str:
    return "-" if math.isnan(value) else f"{value:.1f}"

def ranking_frame(sentences: List[str], ranked: List[RankedSentence], selected: List[int]) -> pd.DataFrame:
    chosen = set(selected)
    rows = []
    for r in ranked:
        text = sentences[r.idx]
        rows.append({
            "Sentence #": r.idx + 1,
            "Score": round(r.score, 4),
            "Selected": "✅" if r.idx in chosen else "",
            "Text": text[:80] + "..." if len(text) > 80 else text,
        })
    return pd.DataFrame(rows)

def similarity_frame(graph: SimilarityGraph) -> pd.DataFrame:
    labels = [f"S{i+1}" for i in range(graph.size)]
    return pd.DataFrame(graph.weights, columns=labels, index=labels)

def edge_weight_stats(graph: SimilarityGraph) -> Dict[str, float]:
    weights = np.array([w for _, _, w in graph.edges()], dtype=float)
    if weights.size == 0:
        return {"edges": 0, "min": 0.0, "max": 0.0, "mean": 0.0, "std": 0.0}
    return {
        "edges": int(weights.size),
        "min": float(weights.min()),
        "max": float(weights.max()),
        "mean": float(weights.mean()),
        "std": float(weights.std()),
    }

def to_networkx(graph: SimilarityGraph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(range(graph.size))
    for i, j, w in graph.edges():
        G.add_edge(i, j, weight=w)
    return G

def draw_similarity_graph(graph: SimilarityGraph, selected: List[int]) -> io.BytesIO:
    """Render the similarity graph; selected sentences are highlighted."""
    G = to_networkx(graph)
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
    chosen = set(selected)
    colors = ['gold' if n in chosen else 'lightblue' for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=800, alpha=0.8)

    edges = list(G.edges(data=True))
    if edges:
        max_weight = max(d['weight'] for _, _, d in edges)
        widths = [3 * (d['weight'] / max_weight) for _, _, d in edges]
        nx.draw_networkx_edges(G, pos, ax=ax, width=widths, alpha=0.6, edge_color='gray')

    nx.draw_networkx_labels(G, pos, {n: f"S{n+1}" for n in G.nodes()}, ax=ax,
                            font_size=10, font_weight='bold')
    ax.set_aspect('equal')
    ax.axis('off')

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def _load_sample():
    st.session_state["input_text"] = SAMPLE_TEXT

def _clear_input():
    st.session_state["input_text"] = ""
    st.session_state.pop("summary", None)

def create_sidebar_controls():
    st.sidebar.header("Parameters")
    strategy = st.sidebar.selectbox(
        "Strategy",
        options=list(Strategy),
        format_func=lambda s: STRATEGY_LABELS[s],
    )
    ratio = st.sidebar.slider(
        "Summary ratio",
        min_value=0.05,
        max_value=1.0,
        value=0.2,
        step=0.05,
        help="Share of sentences to keep (at least one)"
    )
    debug_mode = st.sidebar.checkbox("Show scoring details", value=False)
    return strategy, ratio, debug_mode

def show_metrics(text: str):
    report = analyze(text)
    cols = st.columns(5)
    cols[0].metric("Sentences", report.sentences)
    cols[1].metric("Words", report.words)
    cols[2].metric("Characters", report.characters)
    cols[3].metric("Reading ease", format_reading_ease(report.reading_ease))
    cols[4].metric("Reading time", report.reading_time)

def show_scoring_details(text: str, strategy: Strategy, ratio: float):
    sentences = split_sentences(text)
    if not sentences:
        st.info("Nothing to score yet.")
        return
    ranked = rank_sentences(text, strategy=strategy)
    selected = select_sentences(ranked, target_count(len(sentences), ratio))

    st.subheader("Sentence scores")
    st.dataframe(ranking_frame(sentences, ranked, selected), use_container_width=True)

    if strategy is Strategy.GRAPH:
        graph = build_similarity_graph(sentences)
        stats = edge_weight_stats(graph)
        cols = st.columns(4)
        cols[0].metric("Edges", stats["edges"])
        cols[1].metric("Max similarity", f"{stats['max']:.3f}")
        cols[2].metric("Mean similarity", f"{stats['mean']:.3f}")
        cols[3].metric("Std similarity", f"{stats['std']:.3f}")
        if graph.size <= 50:
            st.dataframe(similarity_frame(graph), use_container_width=True)
            st.image(draw_similarity_graph(graph, selected), caption="Selected sentences in gold")
        else:
            st.info(f"Graph too large to display ({graph.size} sentences)")

def main():
    logging.basicConfig(level=logging.INFO)
    st.title("Extractive Summarizer")
    st.write("Paste text or upload a file, then pick the sentences that matter.")

    strategy, ratio, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader("Or load a text file", type=['txt', 'md'])
    if uploaded_file is not None and st.session_state.get("uploaded_name") != uploaded_file.name:
        st.session_state["input_text"] = load_text_from_file(uploaded_file)
        st.session_state["uploaded_name"] = uploaded_file.name

    col1, col2 = st.columns(2)
    col1.button("Load sample", on_click=_load_sample)
    col2.button("Clear", on_click=_clear_input)

    text = st.text_area("Input text", key="input_text", height=250)
    show_metrics(text)

    if st.button("Summarize", type="primary"):
        logger.info("summarize request: %d chars, strategy=%s, ratio=%.2f", len(text), strategy.value, ratio)
        try:
            st.session_state["summary"] = summarize(text, ratio=ratio, strategy=strategy)
        except InvalidConfiguration as e:
            logger.exception("invalid summarizer settings")
            st.error(f"Invalid settings: {e}")
        except Exception as e:
            logger.exception("summarization failed")
            st.error(f"Error during summarization: {e}")

    if "summary" in st.session_state:
        summary = st.session_state["summary"]
        st.header("Summary")
        st.code(summary or NO_SUMMARY, language=None)
        st.download_button("Download summary.txt", summary, file_name="summary.txt", mime="text/plain")

    if debug_mode:
        st.markdown("---")
        show_scoring_details(text, strategy, ratio)

if __name__ == "__main__":
    main()
