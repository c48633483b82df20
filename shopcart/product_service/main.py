# shopcart/product_service/main.py
# lokalny mock product-service dla PRODUCT_SERVICE_URL
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {
    1: {"id": 1, "name": "Keyboard", "price": "199.99", "description": "Mechanical keyboard"},
    2: {"id": 2, "name": "Mouse", "price": "49.50", "description": "Wireless mouse"},
    3: {"id": 3, "name": "Monitor", "price": "899.00", "description": "27 inch IPS monitor"},
}


@app.get("/products")
def list_products():
    return list(PRODUCTS.values())


@app.get("/products/{product_id}")
def get_product(product_id: int):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
