"""Go source trees shared by scanner, orchestrator and service tests."""

from __future__ import annotations

GO_MOD = """
module github.com/acme/shop

go 1.22
"""

ORDER_PROJECT = {
    "go.mod": GO_MOD,
    "internal/core/entity/order.go": """
        package entity

        import (
        	"time"

        	"github.com/google/uuid"
        )

        // Order is an aggregate root
        type Order struct {
        	ID         uuid.UUID
        	CustomerID uuid.UUID
        	Total      int64
        	CreatedAt  time.Time
        }
    """,
    "internal/core/port/order_repo.go": """
        package port

        import (
        	"context"

        	"github.com/acme/shop/internal/core/entity"
        )

        // OrderRepository persists orders
        type OrderRepository interface {
        	Save(ctx context.Context, order *entity.Order) error
        	FindByID(ctx context.Context, id string) (*entity.Order, error)
        }
    """,
    "internal/adapter/handler/http/order_handler.go": """
        package http

        import (
        	"log/slog"
        	"net/http"

        	"github.com/go-chi/chi/v5"
        )

        // OrderHandler handles HTTP requests for orders
        type OrderHandler struct {
        	logger *slog.Logger
        }

        func (h *OrderHandler) RegisterRoutes(r chi.Router) {
        	r.Get("/orders", h.List)
        }

        func (h *OrderHandler) List(w http.ResponseWriter, r *http.Request) {
        	w.WriteHeader(http.StatusOK)
        }
    """,
}

CUSTOMER_PROJECT = {
    "go.mod": GO_MOD,
    "internal/core/entity/customer.go": """
        package entity

        import (
        	"github.com/acme/shop/internal/core/valueobject"
        	"github.com/google/uuid"
        )

        // Customer is an aggregate root
        type Customer struct {
        	ID    uuid.UUID
        	Email valueobject.Email
        }
    """,
    "internal/core/entity/invoice.go": """
        package entity

        type Invoice struct {
        	ID       string
        	Customer *Customer
        	Lines    []InvoiceLine
        }

        type InvoiceLine struct {
        	Amount int64
        }
    """,
    "internal/core/valueobject/email.go": """
        package valueobject

        type Email struct {
        	value string
        }
    """,
    "internal/core/port/customer_repository.go": """
        package port

        import "context"

        type CustomerRepository interface {
        	Delete(ctx context.Context, id string) error
        }
    """,
    "internal/core/port/customer_service.go": """
        package port

        import "context"

        type CustomerService interface {
        	Remove(ctx context.Context, id string) error
        }
    """,
    "internal/adapter/repository/postgres/customer_repo.go": """
        package postgres

        import "github.com/jackc/pgx/v5/pgxpool"

        type customerRepository struct {
        	db *pgxpool.Pool
        }
    """,
    "internal/adapter/handler/http/customer_handler.go": """
        package http

        type CustomerHandler struct {
        	name string
        }
    """,
    "internal/adapter/handler/http/customer_dto.go": """
        package http

        type CreateCustomerRequest struct {
        	Email string `json:"email"`
        }

        type CustomerResponse struct {
        	ID string `json:"id"`
        }
    """,
    "internal/adapter/handler/http/customer_handler_test.go": """
        package http

        type FakeCustomerHandler struct{}
    """,
    "internal/generator/wire.go": """
        package generator

        type WireGenerator struct{}
    """,
}
