#!/usr/bin/env python3
"""
宝可梦对战分析 终端客户端

用法:
    ./venv/bin/python dashboard_cli.py predict 6 9
    ./venv/bin/python dashboard_cli.py overview --sample 10
    ./venv/bin/python dashboard_cli.py models
"""
import argparse
import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from app.combat.type_chart import type_label
from app.models import DataOverviewResponse, ModelEvaluationResponse, PredictionResponse
from app.services.dashboard_service import DashboardService
from app.services.pokedex_store import PokedexStore
from app.services.prediction_service import PredictionService


console = Console()


def _types_text(type_1: str, type_2) -> str:
    label = type_label(type_1)
    second = type_label(type_2)
    return f"{label} | {second}" if second else label


def render_prediction(result: PredictionResponse) -> None:
    """打印预测结果"""
    title = Text()
    title.append(f"{result.winner.nom}", style="bold yellow")
    title.append(" wins!\n", style="white")
    title.append(f"Probability: {result.win_probability:.1f}%", style="yellow")
    if result.is_tie:
        title.append("  (tie: first challenger wins)", style="dim")
    console.print(Panel(title, title="Prediction Result", border_style="yellow", padding=(0, 2)))
    console.print(Panel(result.explanation, border_style="dim"))

    table = Table(title="Score breakdown", border_style="dim", show_header=True)
    table.add_column("Pokémon", style="cyan")
    table.add_column("Types", style="white")
    table.add_column("Total", justify="right")
    table.add_column("Battle score", justify="right")
    table.add_column("Type x", justify="right")
    table.add_column("Final", justify="right", style="bold")
    for pokemon, info in (
        (result.winner, result.winner_breakdown),
        (result.loser, result.loser_breakdown),
    ):
        table.add_row(
            pokemon.nom,
            _types_text(pokemon.type_1, pokemon.type_2),
            f"{info.total_stats:g}",
            f"{info.battle_score:.1f}",
            f"{info.type_multiplier:g}",
            f"{info.final_score:.1f}",
        )
    console.print(table)


def render_overview(overview: DataOverviewResponse) -> None:
    """打印数据总览"""
    summary = overview.summary
    console.print(Panel(
        f"Total Pokémon: {summary.pokemon_count}\n"
        f"Legendary: {summary.legendary_ratio:.0f}% ({summary.legendary_count} Pokémon)\n"
        f"Total Combats: {summary.combat_count:,}",
        title="Dataset Summary",
        border_style="cyan",
    ))

    table = Table(title=f"Pokémon Sample (Top {len(overview.pokemon_sample)})", border_style="dim")
    for column in ("ID", "Name", "Type", "HP", "Attack", "Defense", "Speed", "Win Rate"):
        table.add_column(column, justify="left" if column in ("Name", "Type") else "right")
    for p in overview.pokemon_sample:
        table.add_row(
            str(p.numero),
            p.nom,
            _types_text(p.type_1, p.type_2),
            str(p.points_de_vie),
            str(p.points_attaque),
            str(p.points_deffence),
            str(p.points_vitesse),
            f"{p.taux_de_victoire * 100:.1f}%",
        )
    console.print(table)

    stats = Table(title="Average Combat Stats", border_style="dim")
    stats.add_column("Stat", style="cyan")
    stats.add_column("Average", justify="right")
    stats.add_column("", style="green")
    for row in overview.average_stats:
        stats.add_row(row.name, f"{row.value:.0f}", "█" * int(row.relative / 5))
    console.print(stats)

    rates = Table(title="Winner Count by Type", border_style="dim")
    rates.add_column("Type", style="cyan")
    rates.add_column("Win Rate", justify="right")
    rates.add_column("Wins", justify="right")
    for row in overview.type_win_rates:
        rates.add_row(row.label, f"{row.win_rate:.1f}%", str(row.wins))
    console.print(rates)


def render_models(evaluation: ModelEvaluationResponse) -> None:
    """打印模型评估对比"""
    regression = Table(title="Regression Models Comparison", border_style="dim")
    for column in ("Model", "R² Score", "MSE", "MAE"):
        regression.add_column(column, justify="left" if column == "Model" else "right")
    best_reg = evaluation.best_regression.id if evaluation.best_regression else None
    for m in evaluation.regression_models:
        name = f"[bold green]{m.model_name}[/bold green]" if m.id == best_reg else m.model_name
        regression.add_row(name, f"{m.r2_score or 0:.4f}", f"{m.mse or 0:.4f}", f"{m.mae or 0:.4f}")
    console.print(regression)

    classification = Table(title="Classification Models Comparison", border_style="dim")
    for column in ("Model", "Accuracy", "Precision", "Recall", "F1"):
        classification.add_column(column, justify="left" if column == "Model" else "right")
    best_cls = evaluation.best_classification.id if evaluation.best_classification else None
    for m in evaluation.classification_models:
        name = f"[bold green]{m.model_name}[/bold green]" if m.id == best_cls else m.model_name
        classification.add_row(
            name,
            f"{(m.accuracy or 0) * 100:.1f}%",
            f"{m.precision or 0:.2f}",
            f"{m.recall or 0:.2f}",
            f"{m.f1_score or 0:.2f}",
        )
    console.print(classification)


async def run(args: argparse.Namespace) -> None:
    store = PokedexStore()
    if args.command == "predict":
        with console.status("[cyan]计算中...[/cyan]", spinner="dots"):
            result = await PredictionService(store).predict(args.first, args.second)
        render_prediction(result)
    elif args.command == "overview":
        with console.status("[cyan]加载数据...[/cyan]", spinner="dots"):
            overview = await DashboardService(store).get_overview(sample_size=args.sample)
        render_overview(overview)
    elif args.command == "models":
        with console.status("[cyan]加载模型结果...[/cyan]", spinner="dots"):
            evaluation = await DashboardService(store).get_model_evaluation()
        render_models(evaluation)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="宝可梦对战分析终端客户端",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  python dashboard_cli.py predict 6 9       # 预测 #6 vs #9
  python dashboard_cli.py overview -n 20    # 数据总览（20条样本）
  python dashboard_cli.py models            # 模型评估对比
        """
    )
    sub = parser.add_subparsers(dest="command", required=True)

    predict = sub.add_parser("predict", help="预测对战胜者")
    predict.add_argument("first", type=int, help="挑战者1 图鉴编号")
    predict.add_argument("second", type=int, help="挑战者2 图鉴编号")

    overview = sub.add_parser("overview", help="数据总览")
    overview.add_argument("--sample", "-n", type=int, default=None, help="样本数量")

    sub.add_parser("models", help="模型评估对比")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    try:
        asyncio.run(run(args))
    except Exception as e:
        console.print(f"\n[red]错误: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
