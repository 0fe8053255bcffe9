"""SQLAlchemy database models."""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from littlecook.database import Base


class Ingredient(Base):
    """Catalog ingredient, unique per name and unit."""

    __tablename__ = "ingredients"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    recipe_lines: Mapped[list["RecipeIngredient"]] = relationship(
        "RecipeIngredient", back_populates="ingredient"
    )

    __table_args__ = (
        UniqueConstraint("name", "unit", name="uq_ingredient_name_unit"),
        Index("idx_ingredients_category", "category"),
    )


class Recipe(Base):
    """Recipe with its base serving count and ingredient lines."""

    __tablename__ = "recipes"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    servings: Mapped[int | None] = mapped_column(Integer, nullable=True)
    minimal_servings: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    ingredients: Mapped[list["RecipeIngredient"]] = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )
    meal_plans: Mapped[list["MealPlan"]] = relationship("MealPlan", back_populates="recipe")


class RecipeIngredient(Base):
    """One ingredient line of a recipe, relative to the recipe's servings."""

    __tablename__ = "recipe_ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[str] = mapped_column(
        String, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    )
    ingredient_id: Mapped[str] = mapped_column(
        String, ForeignKey("ingredients.id"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, default=0)
    quantity: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    # Raw text kept when an imported quantity could not be read as a number
    quantity_text: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    recipe: Mapped["Recipe"] = relationship("Recipe", back_populates="ingredients")
    ingredient: Mapped["Ingredient"] = relationship("Ingredient", back_populates="recipe_lines")

    __table_args__ = (Index("idx_recipe_ingredients_recipe_id", "recipe_id"),)


class MealUser(Base):
    """Household profile that can be assigned to meals."""

    __tablename__ = "meal_users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    pseudo: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    assignments: Mapped[list["MealUserAssignment"]] = relationship(
        "MealUserAssignment", back_populates="meal_user"
    )


class MealPlan(Base):
    """A recipe scheduled on a date and meal slot."""

    __tablename__ = "meal_plans"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    meal_date: Mapped[date] = mapped_column(Date, nullable=False)
    meal_type: Mapped[str] = mapped_column(String(20), nullable=False)  # BREAKFAST, LUNCH, ...
    recipe_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("recipes.id", ondelete="SET NULL"), nullable=True
    )
    cook_responsible_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("meal_users.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    recipe: Mapped[Optional["Recipe"]] = relationship("Recipe", back_populates="meal_plans")
    cook_responsible: Mapped[Optional["MealUser"]] = relationship("MealUser")
    assignments: Mapped[list["MealUserAssignment"]] = relationship(
        "MealUserAssignment", back_populates="meal_plan", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_meal_plans_meal_date", "meal_date"),
        Index("idx_meal_plans_cook_responsible_id", "cook_responsible_id"),
    )


class MealUserAssignment(Base):
    """Join table between meal plans and the profiles eating them."""

    __tablename__ = "meal_user_assignments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    meal_plan_id: Mapped[str] = mapped_column(
        String, ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False
    )
    meal_user_id: Mapped[str] = mapped_column(
        String, ForeignKey("meal_users.id", ondelete="CASCADE"), nullable=False
    )

    meal_plan: Mapped["MealPlan"] = relationship("MealPlan", back_populates="assignments")
    meal_user: Mapped["MealUser"] = relationship("MealUser", back_populates="assignments")

    __table_args__ = (
        UniqueConstraint("meal_plan_id", "meal_user_id", name="uq_meal_user_assignment"),
        Index("idx_meal_user_assignments_meal_user_id", "meal_user_id"),
    )
